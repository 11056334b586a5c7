# File: getlocalbuddy/api/routes_posts.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from getlocalbuddy.api.deps import get_db
from getlocalbuddy.schemas.post import PostCreate, PostRead
from getlocalbuddy.services import post_service

router = APIRouter()


@router.get("", response_model=list[PostRead], summary="List posts, newest first")
def list_posts(db: Session = Depends(get_db)):
    return post_service.list_posts(db)


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
)
def create_post(payload: PostCreate, db: Session = Depends(get_db)):
    return post_service.create_post(db, content=payload.content, author_id=payload.author_id)
