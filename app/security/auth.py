"""
비밀번호 해싱과 JWT 액세스 토큰
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from app.config import settings
from app.schemas.user import TokenPayload

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    액세스 토큰 발급

    클레임: sub(사용자 ID 문자열), role, iat, exp
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        # python-jose는 문자열이 아닌 sub를 디코딩 시 거부함
        "sub": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenPayload:
    """서명/만료를 검사하고 페이로드를 반환 (실패 시 JWTError 또는 ValidationError)"""
    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    return TokenPayload.model_validate(claims)


def verify_token(token: str) -> Optional[TokenPayload]:
    """유효한 토큰이면 페이로드, 아니면 None"""
    try:
        return decode_access_token(token)
    except ExpiredSignatureError:
        logger.info("Rejected expired access token")
    except (JWTError, ValidationError) as exc:
        logger.info("Rejected access token: %s", exc.__class__.__name__)
    return None
