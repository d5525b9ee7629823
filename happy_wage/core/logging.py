"""
logging.py - 로깅 설정
"""

import logging
from typing import Union

from rich.logging import RichHandler


def setup_logger(name: str = "happy_wage", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Rich 포맷 로거 설정

    엔진 모듈은 logging.getLogger(__name__)으로 이 로거의 하위 로거를 사용한다.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
