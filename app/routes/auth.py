"""
인증 API 라우트
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import UserLogin, TokenResponse
from app.services.user_service import UserService
from app.security.auth import create_access_token

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"]
)


@router.post("/login", response_model=TokenResponse)
async def login(
        user_login: UserLogin,
        db: Session = Depends(get_db)
):
    """로그인 및 토큰 발급"""
    user = UserService.authenticate(db, user_login.email, user_login.password)
    access_token = create_access_token(user.id, user.role.value)

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": user
    }
