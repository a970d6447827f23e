"""
예약 조회 API 라우트
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user, query_params
from app.schemas.query import GetReservationQuery
from app.schemas.reservation import ReservationListResponse, ReservationResponse
from app.schemas.user import TokenPayload
from app.security.policy import require_valid_id
from app.services.reservation_service import ReservationService
from app.utils.exceptions import NotFoundException

router = APIRouter(
    prefix="/reservations",
    tags=["Reservations"]
)


@router.get("", response_model=ReservationListResponse)
async def list_reservations(
        current_user: TokenPayload = Depends(get_current_user),
        query: GetReservationQuery = Depends(query_params(GetReservationQuery)),
        db: Session = Depends(get_db)
):
    """
    예약 목록 조회
    - hashtag_id, category_id가 0(전체)이 아니면 해당 값으로 필터링합니다.
    """
    reservations, total = ReservationService.find_many(
        db, query.take, query.page, query.hashtag_id, query.category_id
    )
    return {
        "total": total,
        "take": query.take,
        "page": query.page,
        "items": reservations
    }


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
        reservation_id: int,
        current_user: TokenPayload = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """예약 상세 조회"""
    require_valid_id(reservation_id)
    reservation = ReservationService.find_by_id(db, reservation_id)
    if not reservation:
        raise NotFoundException(detail=f"Reservation with ID {reservation_id} not found")
    return reservation
