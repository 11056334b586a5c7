# File: getlocalbuddy/api/routes_auth.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from getlocalbuddy.api.deps import get_db
from getlocalbuddy.schemas.user import LoginRequest, RegisterRequest, RegisterResponse, UserRead
from getlocalbuddy.services.auth_service import authenticate_user, register_user

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="User registration",
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    user = register_user(db, email=payload.email, password=payload.password, role=payload.role)
    return RegisterResponse(message="User created successfully.", user_id=user.id)


@router.post("/login", response_model=UserRead, summary="User login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return authenticate_user(db, email=payload.email, password=payload.password)
