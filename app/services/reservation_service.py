"""
예약 조회 서비스
비즈니스 로직 계층
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from app.models.reservation import Reservation
from app.models.category import Hashtag
from app.schemas.query import SelectAllType


class ReservationService:
    """예약 조회 서비스"""

    @staticmethod
    def find_many(
            db: Session,
            take: int,
            page: int,
            hashtag_id: int = SelectAllType.ALL,
            category_id: int = SelectAllType.ALL,
    ) -> tuple[List[Reservation], int]:
        """예약 목록 조회 (해시태그 / 카테고리 필터)"""
        query = db.query(Reservation)
        if hashtag_id != SelectAllType.ALL:
            query = query.filter(Reservation.hashtags.any(Hashtag.id == hashtag_id))
        if category_id != SelectAllType.ALL:
            query = query.filter(Reservation.category_id == category_id)

        total = query.count()
        reservations = (
            query.options(
                selectinload(Reservation.mentor),
                selectinload(Reservation.mentee),
                selectinload(Reservation.hashtags),
            )
            .order_by(Reservation.created_at.desc(), Reservation.id.desc())
            .offset(take * page)
            .limit(take)
            .all()
        )
        return reservations, total

    @staticmethod
    def find_by_id(db: Session, reservation_id: int) -> Optional[Reservation]:
        """ID로 예약 조회"""
        return db.query(Reservation).filter(Reservation.id == reservation_id).first()
