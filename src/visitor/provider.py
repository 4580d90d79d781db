"""디렉터리 목록 제공자./Directory listing providers."""

from __future__ import annotations

import logging
import os
from typing import List, Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class FilesystemProvider(Protocol):
    """디렉터리 바로 아래 항목을 나열합니다./List entries directly under a directory.

    두 메서드 모두 실패 시 ``OSError``를 발생시킵니다./Both methods raise
    ``OSError`` on failure.
    """

    def list_files(self, path: str) -> List[str]:
        ...

    def list_directories(self, path: str) -> List[str]:
        ...


class LocalFilesystemProvider:
    """``os.scandir`` 기반 구현./Provider backed by ``os.scandir``."""

    def __init__(self, *, sort_entries: bool = True, follow_symlinks: bool = False) -> None:
        self._sort_entries = sort_entries
        self._follow_symlinks = follow_symlinks

    def list_files(self, path: str) -> List[str]:
        """파일 경로를 반환합니다./Return file paths under ``path``."""

        return self._list(path, want_dirs=False)

    def list_directories(self, path: str) -> List[str]:
        """하위 디렉터리 경로를 반환합니다./Return subdirectory paths under ``path``."""

        return self._list(path, want_dirs=True)

    def _list(self, path: str, *, want_dirs: bool) -> List[str]:
        follow = self._follow_symlinks
        entries: List[os.DirEntry[str]] = []
        with os.scandir(path) as iterator:
            for entry in iterator:
                if want_dirs:
                    if entry.is_dir(follow_symlinks=follow):
                        entries.append(entry)
                elif entry.is_file(follow_symlinks=follow):
                    entries.append(entry)
        if self._sort_entries:
            entries.sort(key=lambda entry: entry.name)
        LOGGER.debug(
            "listed %d %s under %s", len(entries), "dirs" if want_dirs else "files", path
        )
        return [entry.path for entry in entries]
