"""파일 시스템 방문자 API./File system visitor API."""

from __future__ import annotations

from .exceptions import (
    FilesystemAccessError,
    FilterFailureError,
    InvalidArgumentError,
    VisitorError,
)
from .filters import accept_all, all_of, extension_filter, glob_filter, regex_filter
from .models import (
    CancellationToken,
    FilterPredicate,
    Listener,
    VisitEvent,
    VisitEventKind,
    VisitStatistics,
)
from .provider import FilesystemProvider, LocalFilesystemProvider
from .stats import StatisticsCollector
from .walker import FileSystemVisitor

__all__ = [
    "CancellationToken",
    "FileSystemVisitor",
    "FilesystemAccessError",
    "FilesystemProvider",
    "FilterFailureError",
    "FilterPredicate",
    "InvalidArgumentError",
    "Listener",
    "LocalFilesystemProvider",
    "StatisticsCollector",
    "VisitEvent",
    "VisitEventKind",
    "VisitStatistics",
    "VisitorError",
    "accept_all",
    "all_of",
    "extension_filter",
    "glob_filter",
    "regex_filter",
]
