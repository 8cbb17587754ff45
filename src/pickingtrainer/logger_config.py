"""ロギング設定"""

import logging
from typing import Optional

from rich.logging import RichHandler

from pickingtrainer.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """ルートロガーに RichHandler を設定する。"""
    log_level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        tracebacks_suppress=[logging],
    )
    root_logger.handlers = [rich_handler]
