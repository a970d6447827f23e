"""
카테고리 / 해시태그 모델 (데이터베이스 테이블)
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class Category(Base):
    """멘토링 카테고리 테이블"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)

    reservations = relationship("Reservation", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"


class Hashtag(Base):
    """해시태그 테이블"""
    __tablename__ = "hashtags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)

    reservations = relationship("Reservation", secondary="reservation_hashtags", back_populates="hashtags")

    def __repr__(self):
        return f"<Hashtag(id={self.id}, name={self.name})>"
