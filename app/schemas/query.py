"""
페이지네이션 / 필터 쿼리 스키마 (Query DTO)
"""
from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field

# 데이터베이스 INTEGER(64비트 부호 있는 정수) 최댓값
MAX_DB_INT = 2 ** 63 - 1
MAX_TAKE = 100
# take * page(OFFSET)도 MAX_DB_INT를 넘지 않아야 함
MAX_PAGE = MAX_DB_INT // MAX_TAKE


class SelectAllType(IntEnum):
    """ID 필터를 적용하지 않음을 뜻하는 값"""
    ALL = 0


class GetUserQuery(BaseModel):
    """사용자 목록 조회 쿼리"""
    model_config = ConfigDict(extra="ignore")

    take: int = Field(20, ge=1, le=MAX_TAKE, description="페이지 크기")
    page: int = Field(0, ge=0, le=MAX_PAGE, description="0부터 시작하는 페이지 번호")


class GetUserReservationQuery(GetUserQuery):
    """사용자 예약 목록 조회 쿼리"""
    active: bool = Field(True, description="진행 중인 예약만 조회할지 여부")


class GetReservationQuery(GetUserQuery):
    """예약 목록 조회 쿼리 (해시태그 / 카테고리 필터)"""
    hashtag_id: int = Field(SelectAllType.ALL, ge=0, le=MAX_DB_INT)
    category_id: int = Field(SelectAllType.ALL, ge=0, le=MAX_DB_INT)
