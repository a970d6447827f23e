"""
권한 정책

- 관리자 전용 작업: 요청자의 역할이 ADMIN이어야 함
- 본인 리소스 작업: 요청자가 리소스 소유자이거나 ADMIN이어야 함
"""
import logging
from typing import Optional
from app.models.user import UserRole
from app.schemas.query import MAX_DB_INT
from app.schemas.user import TokenPayload
from app.utils.exceptions import BadRequestException, UnauthorizedException

logger = logging.getLogger(__name__)


def is_authorized(
        caller: TokenPayload,
        owner_id: Optional[int] = None,
        required_role: UserRole = UserRole.ADMIN,
) -> bool:
    """요청자가 작업을 수행할 수 있는지 여부"""
    if caller.role == required_role:
        return True
    return owner_id is not None and caller.id == owner_id


def authorize(
        caller: TokenPayload,
        owner_id: Optional[int] = None,
        required_role: UserRole = UserRole.ADMIN,
) -> None:
    """권한이 없으면 UnauthorizedException 발생"""
    if not is_authorized(caller, owner_id, required_role):
        logger.warning(
            "Access denied: user=%s role=%s owner=%s required=%s",
            caller.id, caller.role.value, owner_id, required_role.value,
        )
        raise UnauthorizedException(detail="Not enough permissions")


def require_valid_id(id: int) -> int:
    """경로 ID 검사 (0 이하이거나 DB 정수 범위를 넘으면 BadRequestException)"""
    if not id or id < 0 or id > MAX_DB_INT:
        raise BadRequestException(detail=f"Invalid id: {id}")
    return id
