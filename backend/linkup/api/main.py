from fastapi import APIRouter

from linkup.api.routes import (
    connections,
    notifications,
    utils,
)

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(connections.router)
api_router.include_router(notifications.router)
