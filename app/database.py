"""
SQLAlchemy 엔진 / 세션 / 모델 베이스
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.config import settings

Base = declarative_base()


def create_db_engine(url: str, **kwargs) -> Engine:
    """URL에 맞는 옵션으로 엔진 생성 (SQLite는 스레드 검사 해제)"""
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, connect_args=connect_args, echo=settings.database_echo, **kwargs)


def init_db(bind: Engine) -> None:
    """모든 모델 테이블 생성"""
    # 관계 문자열이 풀리도록 모델을 먼저 등록
    from app.models import category, reservation, user  # noqa: F401
    Base.metadata.create_all(bind=bind)


engine = create_db_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """요청 단위 세션 (요청이 끝나면 닫힘)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
