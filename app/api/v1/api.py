from fastapi import APIRouter

from app.api.v1.endpoints import cube

api_router = APIRouter()

api_router.include_router(cube.router, prefix="/cube", tags=["cube"])
