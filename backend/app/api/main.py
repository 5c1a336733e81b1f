from fastapi import APIRouter

from app.api.routes import game, optimize

api_router = APIRouter()
api_router.include_router(game.router)
api_router.include_router(optimize.router)
