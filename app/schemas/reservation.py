"""
예약 관련 Pydantic 스키마 (API 응답)
"""
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from app.models.reservation import ReservationStatus


class HashtagResponse(BaseModel):
    """해시태그"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ReservationUserSummary(BaseModel):
    """예약에 포함되는 사용자 요약"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nickname: str


class ReservationResponse(BaseModel):
    """예약 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    mentor_id: int
    mentee_id: int
    category_id: Optional[int]
    status: ReservationStatus
    request_message: Optional[str]
    mentor: ReservationUserSummary
    mentee: ReservationUserSummary
    hashtags: list[HashtagResponse]
    created_at: datetime
    updated_at: datetime


class ReservationListResponse(BaseModel):
    """예약 목록 응답"""
    total: int
    take: int
    page: int
    items: list[ReservationResponse]
