# File: getlocalbuddy/api/routes_users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from getlocalbuddy.api.deps import get_db
from getlocalbuddy.schemas.user import UserRead, UserUpdate
from getlocalbuddy.services import user_service

router = APIRouter()


@router.get("/{user_id}", response_model=UserRead, summary="Get user profile")
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserRead, summary="Update user profile")
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, user_id, payload)
