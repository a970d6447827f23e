"""
쿼리 파라미터 검증

원본 쿼리 문자열 값을 스키마에 맞춰 변환/검증하고,
예외 대신 성공/실패를 담은 결과 객체를 돌려줍니다.
"""
from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """필드 단위 검증 오류"""
    field: str
    message: str


@dataclass
class ValidationResult(Generic[T]):
    """검증 결과 (value 또는 errors 중 하나만 채워짐)"""
    value: Optional[T] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_query(schema: Type[T], params: Mapping[str, str]) -> ValidationResult[T]:
    """
    쿼리 파라미터 검증

    Args:
        schema: 쿼리 스키마 (GetUserQuery 등)
        params: 원본 쿼리 값. 키가 없을 때만 기본값이 적용되고, 빈 문자열은 그대로 검증됩니다.

    Returns:
        ValidationResult: 성공 시 value, 실패 시 필드별 errors
    """
    try:
        return ValidationResult(value=schema.model_validate(dict(params)))
    except ValidationError as exc:
        errors = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "query",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return ValidationResult(errors=errors)
