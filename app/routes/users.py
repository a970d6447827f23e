"""
사용자 API 라우트
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user, query_params
from app.models.reservation import REQUEST_STATUSES, statuses_for
from app.models.user import UserRole
from app.schemas.query import GetUserQuery, GetUserReservationQuery
from app.schemas.user import (
    TokenPayload,
    UserCreate,
    UserGetResponse,
    UserReservationGet,
    UserReservationPaginationResponse,
    UserUpdate,
)
from app.security.policy import authorize, require_valid_id
from app.services.user_service import UserService
from app.utils.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
)

router = APIRouter(
    prefix="/users",
    tags=["Users"]
)


@router.get("", response_model=list[UserGetResponse])
async def get_users(
        current_user: TokenPayload = Depends(get_current_user),
        query: GetUserQuery = Depends(query_params(GetUserQuery)),
        db: Session = Depends(get_db)
):
    """사용자 목록 조회 (관리자 전용)"""
    authorize(current_user)
    return UserService.find_many(db, query.take, query.page)


@router.get("/verify_nickname/{nickname}", status_code=status.HTTP_200_OK)
async def verify_nickname(
        nickname: str,
        db: Session = Depends(get_db)
):
    """닉네임 사용 가능 여부 확인 (이미 있으면 409)"""
    if UserService.find_by_nickname(db, nickname):
        raise ConflictException(detail="Nickname already exists")
    return None


@router.get("/{id}", response_model=UserGetResponse)
async def get_user_by_id(
        id: int,
        current_user: TokenPayload = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """사용자 상세 조회"""
    require_valid_id(id)
    user = UserService.find_by_id(db, id)
    if not user:
        raise NotFoundException(detail=f"User with ID {id} not found")
    return user


@router.post("", response_model=UserGetResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
        user_data: UserCreate,
        current_user: TokenPayload = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """사용자 생성 (관리자 전용)"""
    authorize(current_user)
    return UserService.create(db, user_data)


@router.patch("/{id}", response_model=UserGetResponse)
async def update_user(
        id: int,
        user_data: UserUpdate,
        current_user: TokenPayload = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """사용자 정보 수정 (본인 또는 관리자)"""
    require_valid_id(id)
    authorize(current_user, owner_id=id)

    update_data = user_data.model_dump(exclude_unset=True)
    # 관리자가 아니면 역할 변경 요청은 무시함
    if current_user.role != UserRole.ADMIN:
        update_data.pop("role", None)

    return UserService.update(db, id, update_data)


@router.get("/{id}/reservations/as_mentor", response_model=UserReservationPaginationResponse)
async def get_user_reservations_as_mentor(
        id: int,
        current_user: TokenPayload = Depends(get_current_user),
        query: GetUserReservationQuery = Depends(query_params(GetUserReservationQuery)),
        db: Session = Depends(get_db)
):
    """멘토로 참여한 예약 목록 (본인 또는 관리자)"""
    require_valid_id(id)
    authorize(current_user, owner_id=id)
    reservations = UserService.find_user_reservation_as_mentor(
        db, id, query.take, query.page, statuses_for(query.active)
    )
    if not reservations:
        raise BadRequestException(detail=f"Cannot load reservations of user {id}")
    return reservations


@router.get("/{id}/reservations/as_mentee", response_model=UserReservationPaginationResponse)
async def get_user_reservations_as_mentee(
        id: int,
        current_user: TokenPayload = Depends(get_current_user),
        query: GetUserReservationQuery = Depends(query_params(GetUserReservationQuery)),
        db: Session = Depends(get_db)
):
    """멘티로 참여한 예약 목록 (본인 또는 관리자)"""
    require_valid_id(id)
    authorize(current_user, owner_id=id)
    reservations = UserService.find_user_reservation_as_mentee(
        db, id, query.take, query.page, statuses_for(query.active)
    )
    if not reservations:
        raise BadRequestException(detail=f"Cannot load reservations of user {id}")
    return reservations


@router.get("/{id}/reservations/request", response_model=UserReservationGet)
async def get_user_reservation_requests(
        id: int,
        current_user: TokenPayload = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """처리 대기 중인 예약 (요청/수락 상태, 최대 100건)"""
    require_valid_id(id)
    authorize(current_user, owner_id=id)
    reservations = UserService.find_user_reservation(
        db, id, take=100, page=0, status=list(REQUEST_STATUSES)
    )
    if not reservations:
        raise BadRequestException(detail=f"Cannot load reservations of user {id}")
    return reservations
