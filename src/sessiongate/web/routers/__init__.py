from sessiongate.web.routers.auth import router as auth_router
from sessiongate.web.routers.pages import router as pages_router

__all__ = [
    "auth_router",
    "pages_router",
]
