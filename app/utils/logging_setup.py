"""
로깅 설정

애플리케이션 시작 시 한 번 호출되어 루트 로거에 스트림 핸들러를 붙입니다.
각 모듈은 logging.getLogger(__name__)으로 로거를 가져다 씁니다.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거 설정

    Args:
        level (str): 로그 레벨 이름 (예: "DEBUG", "INFO")

    Note:
        - 여러 번 호출되어도 핸들러는 하나만 붙습니다 (레벨만 갱신).
        - 알 수 없는 레벨 이름은 INFO로 처리합니다.
    """
    global _handler

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(log_level)

    logging.getLogger(__name__).info(
        "Logging configured (level=%s)", logging.getLevelName(log_level)
    )
