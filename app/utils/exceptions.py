"""
사용자 정의 예외 클래스
"""
from typing import Any
from fastapi import HTTPException, status


class BadRequestException(HTTPException):
    """잘못된 요청 (유효하지 않은 ID, 쿼리 파라미터 등)"""
    def __init__(self, detail: Any = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundException(HTTPException):
    """리소스를 찾을 수 없을 때 발생"""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedException(HTTPException):
    """인증이 필요하거나 권한 검사에 실패했을 때 발생"""
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class ConflictException(HTTPException):
    """이미 존재하는 리소스"""
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
