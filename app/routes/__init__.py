from app.routes.blog import router as blog_router
from app.routes.login import router as login_router
from app.routes.user import router as user_router

__all__ = [
    "blog_router",
    "login_router",
    "user_router",
]
