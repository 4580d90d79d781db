"""알림 집계 리스너./Listener that tallies notifications."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import VisitEvent, VisitEventKind, VisitStatistics
from .walker import FileSystemVisitor


@dataclass(slots=True, eq=False)
class StatisticsCollector:
    """방문자 알림을 세어 통계를 만듭니다./Count visitor notifications."""

    stats: VisitStatistics = field(default_factory=VisitStatistics)

    def attach(self, visitor: FileSystemVisitor) -> "StatisticsCollector":
        """방문자에 등록합니다./Subscribe to every notification kind."""

        visitor.subscribe_all(self)
        return self

    def detach(self, visitor: FileSystemVisitor) -> None:
        for kind in VisitEventKind:
            visitor.unsubscribe(kind, self)

    def __call__(self, event: VisitEvent) -> None:
        stats = self.stats
        if event.kind is VisitEventKind.FILE_FOUND:
            stats.files += 1
        elif event.kind is VisitEventKind.DIRECTORY_FOUND:
            stats.directories += 1
        elif event.kind is VisitEventKind.FILTERED_FILE_FOUND:
            stats.filtered_files += 1
        elif event.kind is VisitEventKind.FILTERED_DIRECTORY_FOUND:
            stats.filtered_directories += 1
        elif event.kind is VisitEventKind.FINISHED:
            stats.finished = True
