"""
멘토링 예약 모델 (데이터베이스 테이블)
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum
from app.database import Base


class ReservationStatus(str, enum.Enum):
    """예약 상태"""
    REQUEST = "REQUEST"  # 멘티가 요청함
    ACCEPT = "ACCEPT"  # 멘토가 수락함
    MENTEE_CHECKED = "MENTEE_CHECKED"  # 멘티가 수락을 확인함
    MENTEE_FEEDBACK = "MENTEE_FEEDBACK"  # 멘티가 피드백을 남김
    DONE = "DONE"  # 완료
    CANCEL = "CANCEL"  # 취소됨


ACTIVE_STATUSES = (
    ReservationStatus.REQUEST,
    ReservationStatus.ACCEPT,
    ReservationStatus.MENTEE_CHECKED,
    ReservationStatus.MENTEE_FEEDBACK,
)
INACTIVE_STATUSES = (ReservationStatus.DONE, ReservationStatus.CANCEL)
REQUEST_STATUSES = (ReservationStatus.REQUEST, ReservationStatus.ACCEPT)


def statuses_for(active: bool) -> list[ReservationStatus]:
    """진행 중(active) 여부에 해당하는 예약 상태 목록"""
    return list(ACTIVE_STATUSES if active else INACTIVE_STATUSES)


reservation_hashtags = Table(
    "reservation_hashtags",
    Base.metadata,
    Column("reservation_id", Integer, ForeignKey("reservations.id", ondelete="CASCADE"), primary_key=True),
    Column("hashtag_id", Integer, ForeignKey("hashtags.id", ondelete="CASCADE"), primary_key=True),
)


class Reservation(Base):
    """멘토링 예약 테이블"""
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mentee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    status = Column(SQLEnum(ReservationStatus), default=ReservationStatus.REQUEST, nullable=False, index=True)
    request_message = Column(String(1000), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # 관계
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="mentor_reservations")
    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="mentee_reservations")
    category = relationship("Category", back_populates="reservations")
    hashtags = relationship("Hashtag", secondary=reservation_hashtags, back_populates="reservations")

    def __repr__(self):
        return (
            f"<Reservation(id={self.id}, mentor_id={self.mentor_id}, "
            f"mentee_id={self.mentee_id}, status={self.status})>"
        )
