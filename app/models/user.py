"""
사용자 모델 (데이터베이스 테이블)
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum
from app.database import Base


class UserRole(str, enum.Enum):
    """사용자 역할"""
    USER = "USER"  # 일반 사용자 (멘토/멘티)
    ADMIN = "ADMIN"  # 관리자


class User(Base):
    """사용자 테이블"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    nickname = Column(String(30), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    introduce = Column(String(500), nullable=True)
    role = Column(SQLEnum(UserRole), default=UserRole.USER, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # 관계
    mentor_reservations = relationship(
        "Reservation", foreign_keys="Reservation.mentor_id", back_populates="mentor"
    )
    mentee_reservations = relationship(
        "Reservation", foreign_keys="Reservation.mentee_id", back_populates="mentee"
    )

    def __repr__(self):
        return f"<User(id={self.id}, nickname={self.nickname}, role={self.role})>"
