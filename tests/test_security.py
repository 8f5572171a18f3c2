from datetime import timedelta

from app.core.security import (
    hash_password,
    verify_password,
    generate_session_id,
    hash_session_id,
    get_session_expiry,
    get_current_utc_time
)
from app.schemas.common import format_amount


def test_password_hash_round_trip():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_plain_text_stored_password_never_matches():
    assert not verify_password("admin123", "admin123")
    assert not verify_password("admin123", "")


def test_session_ids_are_random_and_hashed():
    first, second = generate_session_id(), generate_session_id()
    assert first != second
    assert len(first) == 64
    assert hash_session_id(first) == hash_session_id(first)
    assert hash_session_id(first) != first


def test_session_expiry_is_in_the_future():
    assert get_session_expiry() - get_current_utc_time() > timedelta(hours=23)


def test_format_amount():
    assert format_amount("100") == "100.00"
    assert format_amount(12.5) == "12.50"
    assert format_amount("0.005") == "0.01"
