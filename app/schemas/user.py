"""
사용자 관련 Pydantic 스키마 (API 요청/응답)
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional
import re
from app.models.user import UserRole
from app.schemas.reservation import ReservationResponse


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not _EMAIL_RE.match(v):
        raise ValueError("Invalid email format")
    return v


class UserCreate(BaseModel):
    """사용자 생성 요청 (관리자 전용)"""
    nickname: str = Field(..., min_length=2, max_length=30)
    email: str
    password: str = Field(..., min_length=8)
    introduce: Optional[str] = Field(None, max_length=500)
    role: UserRole = UserRole.USER

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class UserUpdate(BaseModel):
    """사용자 정보 수정 (부분 수정)"""
    nickname: Optional[str] = Field(None, min_length=2, max_length=30)
    email: Optional[str] = None
    introduce: Optional[str] = Field(None, max_length=500)
    role: Optional[UserRole] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return _check_email(v)


class UserLogin(BaseModel):
    """로그인 요청"""
    email: str
    password: str


class UserGetResponse(BaseModel):
    """사용자 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nickname: str
    email: str
    introduce: Optional[str]
    role: UserRole
    created_at: datetime
    updated_at: datetime


class UserReservationPaginationResponse(BaseModel):
    """멘토/멘티 기준 예약 페이지"""
    total: int
    take: int
    page: int
    items: list[ReservationResponse]


class UserReservationGet(BaseModel):
    """멘토/멘티 양쪽의 예약 목록"""
    as_mentor: list[ReservationResponse]
    as_mentee: list[ReservationResponse]


class TokenResponse(BaseModel):
    """토큰 응답"""
    access_token: str
    token_type: str = "bearer"
    user: UserGetResponse


class TokenPayload(BaseModel):
    """토큰 페이로드 (요청한 사용자)"""
    sub: int
    exp: int
    iat: int
    role: UserRole

    @property
    def id(self) -> int:
        return self.sub
