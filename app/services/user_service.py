"""
사용자 관리 서비스
비즈니스 로직 계층
"""
import logging
from typing import Optional, Sequence
from sqlalchemy.orm import Session, selectinload
from app.models.user import User
from app.models.reservation import Reservation, ReservationStatus
from app.schemas.user import UserCreate
from app.security.auth import hash_password, verify_password
from app.utils.exceptions import NotFoundException, ConflictException, UnauthorizedException

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"nickname", "email", "role"}


def _reservation_query(db: Session):
    return db.query(Reservation).options(
        selectinload(Reservation.mentor),
        selectinload(Reservation.mentee),
        selectinload(Reservation.hashtags),
    )


class UserService:
    """사용자 관리 서비스"""

    @staticmethod
    def find_many(db: Session, take: int, page: int) -> list[User]:
        """사용자 목록 조회 (페이지네이션)"""
        return (
            db.query(User)
            .order_by(User.id)
            .offset(take * page)
            .limit(take)
            .all()
        )

    @staticmethod
    def find_by_id(db: Session, user_id: int) -> Optional[User]:
        """ID로 사용자 조회"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def find_by_nickname(db: Session, nickname: str) -> Optional[User]:
        """닉네임으로 사용자 조회"""
        return db.query(User).filter(User.nickname == nickname).first()

    @staticmethod
    def find_by_email(db: Session, email: str) -> Optional[User]:
        """이메일로 사용자 조회"""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def create(db: Session, user_data: UserCreate) -> User:
        """사용자 생성"""
        existing_user = db.query(User).filter(
            (User.nickname == user_data.nickname) | (User.email == user_data.email)
        ).first()

        if existing_user:
            if existing_user.nickname == user_data.nickname:
                raise ConflictException(detail="Nickname already exists")
            raise ConflictException(detail="Email already exists")

        user = User(
            nickname=user_data.nickname,
            email=user_data.email,
            password_hash=hash_password(user_data.password),
            introduce=user_data.introduce,
            role=user_data.role,
        )

        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created user id=%s nickname=%s role=%s", user.id, user.nickname, user.role.value)
        return user

    @staticmethod
    def update(db: Session, user_id: int, update_data: dict) -> User:
        """
        사용자 정보 수정 (전달된 필드만)
        - introduce는 null로 비울 수 있고, 필수 컬럼에 대한 null은 무시합니다.
        """
        user = UserService.find_by_id(db, user_id)
        if not user:
            raise NotFoundException(detail=f"User with ID {user_id} not found")

        update_data = {
            field: value for field, value in update_data.items()
            if value is not None or field not in _REQUIRED_FIELDS
        }

        nickname = update_data.get("nickname")
        if nickname and nickname != user.nickname:
            if UserService.find_by_nickname(db, nickname):
                raise ConflictException(detail="Nickname already exists")
        email = update_data.get("email")
        if email and email != user.email:
            if UserService.find_by_email(db, email):
                raise ConflictException(detail="Email already exists")

        for field, value in update_data.items():
            setattr(user, field, value)

        db.commit()
        db.refresh(user)
        logger.info("Updated user id=%s fields=%s", user.id, sorted(update_data))
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> User:
        """이메일/비밀번호 인증"""
        user = UserService.find_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            raise UnauthorizedException(detail="Invalid email or password")
        return user

    @staticmethod
    def find_user_reservation_as_mentor(
            db: Session,
            user_id: int,
            take: int,
            page: int,
            status: Sequence[ReservationStatus],
    ) -> Optional[dict]:
        """멘토로 참여한 예약 페이지 (사용자가 없으면 None)"""
        return UserService._paginate(db, user_id, Reservation.mentor_id, take, page, status)

    @staticmethod
    def find_user_reservation_as_mentee(
            db: Session,
            user_id: int,
            take: int,
            page: int,
            status: Sequence[ReservationStatus],
    ) -> Optional[dict]:
        """멘티로 참여한 예약 페이지 (사용자가 없으면 None)"""
        return UserService._paginate(db, user_id, Reservation.mentee_id, take, page, status)

    @staticmethod
    def find_user_reservation(
            db: Session,
            user_id: int,
            take: int,
            page: int,
            status: Sequence[ReservationStatus],
    ) -> Optional[dict]:
        """멘토/멘티 양쪽의 예약 목록 (사용자가 없으면 None)"""
        if not UserService.find_by_id(db, user_id):
            return None

        def fetch(column):
            return (
                _reservation_query(db)
                .filter(column == user_id, Reservation.status.in_(list(status)))
                .order_by(Reservation.created_at.desc(), Reservation.id.desc())
                .offset(take * page)
                .limit(take)
                .all()
            )

        return {
            "as_mentor": fetch(Reservation.mentor_id),
            "as_mentee": fetch(Reservation.mentee_id),
        }

    @staticmethod
    def _paginate(db: Session, user_id: int, column, take: int, page: int, status) -> Optional[dict]:
        if not UserService.find_by_id(db, user_id):
            return None

        query = _reservation_query(db).filter(
            column == user_id,
            Reservation.status.in_(list(status)),
        )
        total = query.count()
        items = (
            query.order_by(Reservation.created_at.desc(), Reservation.id.desc())
            .offset(take * page)
            .limit(take)
            .all()
        )
        return {"total": total, "take": take, "page": page, "items": items}
