# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1.endpoints import menu, orders, auth, admin


api_router = APIRouter()

api_router.include_router(menu.router)
api_router.include_router(orders.router)
api_router.include_router(auth.router)
api_router.include_router(admin.router)
