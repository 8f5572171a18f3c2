# app/core/database.py
from tortoise import Tortoise
from app.core.config import settings

DEFAULT_CONNECTION = "default"

# Upper bound of the 32-bit integer primary keys
MAX_DB_ID = 2 ** 31 - 1


def get_db_url() -> str:
    """
    Convert DATABASE_URL to Tortoise-ORM compatible format.
    Tortoise-ORM uses 'postgres://' instead of 'postgresql://'.
    Postgres URLs also carry the asyncpg pool bounds.
    """
    db_url = settings.DATABASE_URL
    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgres://", 1)

    if db_url.startswith(("postgres://", "asyncpg://")) and "maxsize=" not in db_url:
        separator = "&" if "?" in db_url else "?"
        db_url = (
            f"{db_url}{separator}minsize={settings.DB_POOL_MIN_SIZE}"
            f"&maxsize={settings.DB_POOL_MAX_SIZE}"
        )
    return db_url


TORTOISE_ORM = {
    "connections": {
        DEFAULT_CONNECTION: get_db_url()
    },
    "apps": {
        "models": {
            "models": [
                "app.models.user",
                "app.models.menu",
                "app.models.order",
                "aerich.models"
            ],
            "default_connection": DEFAULT_CONNECTION,
        }
    },
    "use_tz": True,
    "timezone": "UTC",
}


async def init_db() -> None:
    """
    Initialize database connection.
    """
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas()


async def close_db() -> None:
    """
    Close database connection.
    """
    await Tortoise.close_connections()
