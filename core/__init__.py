"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import VisitorConfig
from .errors import CommandError
from .logging import configure_logging
from .timezone import utc_now

__all__ = [
    "VisitorConfig",
    "CommandError",
    "configure_logging",
    "utc_now",
]
