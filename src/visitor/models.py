"""방문자 데이터 모델 정의./Define visitor data models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

FilterPredicate = Callable[[str], bool]
Listener = Callable[["VisitEvent"], None]


class VisitEventKind(str, Enum):
    """순회 알림 종류./Kinds of traversal notification."""

    STARTED = "started"
    FILE_FOUND = "file_found"
    DIRECTORY_FOUND = "directory_found"
    FILTERED_FILE_FOUND = "filtered_file_found"
    FILTERED_DIRECTORY_FOUND = "filtered_directory_found"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class VisitEvent:
    """리스너에 전달되는 알림./Notification delivered to listeners."""

    kind: VisitEventKind
    path: str


@dataclass(slots=True)
class CancellationToken:
    """외부 취소 신호를 전달합니다./Carry cancellation signals.

    스레드 간 공유가 가능합니다./Safe to trigger from another thread.
    """

    _event: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def cancel(self) -> None:
        """취소 상태로 설정합니다./Mark token as cancelled."""

        self._event.set()

    def is_cancelled(self) -> bool:
        """취소 여부를 반환합니다./Return cancellation flag."""

        return self._event.is_set()


@dataclass(slots=True)
class VisitStatistics:
    """순회 알림 집계./Aggregated traversal notification counts."""

    files: int = 0
    directories: int = 0
    filtered_files: int = 0
    filtered_directories: int = 0
    finished: bool = False

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        return {
            "files": self.files,
            "directories": self.directories,
            "filtered_files": self.filtered_files,
            "filtered_directories": self.filtered_directories,
            "finished": self.finished,
        }
