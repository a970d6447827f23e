"""
인증 의존성 및 쿼리 검증
FastAPI 의존성 주입 패턴 사용
"""
from typing import Callable, Optional, Type, TypeVar
from fastapi import Header, Request
from pydantic import BaseModel
from app.schemas.user import TokenPayload
from app.security.auth import verify_token
from app.utils.exceptions import BadRequestException, UnauthorizedException
from app.utils.validation import validate_query

T = TypeVar("T", bound=BaseModel)


async def get_current_user(authorization: Optional[str] = Header(None)) -> TokenPayload:
    """
    JWT 가드
    - Authorization 헤더에서 Bearer 토큰을 추출하고 검증합니다.
    - 검증된 토큰 페이로드(id, role)가 요청자입니다.
    """
    if not authorization:
        raise UnauthorizedException(detail="Missing authorization header")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise UnauthorizedException(detail="Invalid authorization header format")
    if scheme.lower() != "bearer":
        raise UnauthorizedException(detail="Invalid authentication scheme")

    token_payload = verify_token(token)
    if not token_payload:
        raise UnauthorizedException(detail="Invalid or expired token")

    return token_payload


def query_params(schema: Type[T]) -> Callable[[Request], T]:
    """
    쿼리 스키마 검증 의존성 생성
    - 검증 실패 시 필드별 오류를 담아 400을 반환합니다.
    """
    def dependency(request: Request) -> T:
        result = validate_query(schema, request.query_params)
        if not result.ok:
            raise BadRequestException(
                detail=[{"field": e.field, "message": e.message} for e in result.errors]
            )
        return result.value

    return dependency
