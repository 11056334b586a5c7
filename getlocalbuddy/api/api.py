from fastapi import APIRouter

from getlocalbuddy.api.routes_auth import router as auth_router
from getlocalbuddy.api.routes_posts import router as posts_router
from getlocalbuddy.api.routes_status import router as status_router
from getlocalbuddy.api.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(status_router, tags=["status"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(posts_router, prefix="/posts", tags=["posts"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
