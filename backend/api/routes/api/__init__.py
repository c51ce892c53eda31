from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.routes.api.auth import router as auth_router
from backend.api.routes.api.health import router as health_router
from backend.api.routes.api.logs import router as logs_router

api_router = APIRouter(prefix=ApiPaths().api_prefix)

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(logs_router)
