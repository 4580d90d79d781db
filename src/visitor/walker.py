"""파일 시스템 방문자./File system visitor."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Generator, Iterator, List

from .events import ListenerRegistry
from .exceptions import FilesystemAccessError, FilterFailureError, InvalidArgumentError
from .models import CancellationToken, FilterPredicate, Listener, VisitEvent, VisitEventKind
from .provider import FilesystemProvider, LocalFilesystemProvider

LOGGER = logging.getLogger(__name__)

PathInput = str | os.PathLike[str]

# 루트 생략 표시/Marks an omitted root.
_CWD: Any = object()


class FileSystemVisitor:
    """디렉터리 트리를 순회하며 알림을 발행합니다./Walk a tree emitting notifications.

    순회는 파일 우선 전위 깊이 우선이며, 파일을 내보내기 직전마다 취소 토큰을
    확인합니다./Traversal is pre-order, files-first and depth-first; the
    cancellation token is checked right before each file is produced.

    ``cancel_on_finish``가 참이면 정상 종료 시 토큰을 취소하므로 인스턴스당
    한 번만 순회할 수 있습니다./With ``cancel_on_finish`` (the default) a
    finished traversal cancels the shared token, so each instance performs a
    single traversal and later calls return an empty result.
    """

    def __init__(
        self,
        cancellation_token: CancellationToken,
        filter_predicate: FilterPredicate,
        *,
        provider: FilesystemProvider | None = None,
        cancel_on_finish: bool = True,
    ) -> None:
        if not callable(filter_predicate):
            raise InvalidArgumentError("filter predicate must be callable")
        self._token = cancellation_token
        self._filter = filter_predicate
        self._provider: FilesystemProvider = provider or LocalFilesystemProvider()
        self._registry = ListenerRegistry()
        if cancel_on_finish:
            self._registry.subscribe(VisitEventKind.FINISHED, self._cancel_on_finish)

    @property
    def cancellation_token(self) -> CancellationToken:
        return self._token

    @property
    def filter_predicate(self) -> FilterPredicate:
        return self._filter

    def subscribe(self, kind: VisitEventKind, listener: Listener) -> None:
        """알림 리스너를 등록합니다./Register a listener for ``kind``."""

        self._registry.subscribe(kind, listener)

    def unsubscribe(self, kind: VisitEventKind, listener: Listener) -> bool:
        """알림 리스너를 해제합니다./Unregister a listener for ``kind``."""

        return self._registry.unsubscribe(kind, listener)

    def subscribe_all(self, listener: Listener) -> None:
        """모든 종류에 리스너를 등록합니다./Register a listener for every kind."""

        for kind in VisitEventKind:
            self._registry.subscribe(kind, listener)

    def enumerate_files(self, root: PathInput = _CWD) -> List[str]:
        """파일 경로 목록을 반환합니다./Return the file paths under ``root``.

        ``root``를 생략하면 현재 작업 디렉터리에서 시작합니다./Starts from the
        current working directory when ``root`` is omitted; ``None`` or an
        empty path raises ``InvalidArgumentError``.
        """

        return list(self.iter_files(root))

    def iter_files(self, root: PathInput = _CWD) -> Iterator[str]:
        """파일 경로를 지연 생성합니다./Yield file paths lazily.

        루트 검증은 호출 즉시 수행됩니다./The root is validated eagerly.
        """

        if root is _CWD:
            target = os.getcwd()
        elif root is None:
            raise InvalidArgumentError("the target directory should not be null")
        else:
            target = os.fspath(root)
        if not target:
            raise InvalidArgumentError("the target directory should not be empty")
        return self._run(target)

    def _run(self, root: str) -> Iterator[str]:
        if self._token.is_cancelled():
            LOGGER.info("traversal skipped, token already cancelled: %s", root)
            return
        LOGGER.info("traversal started: %s", root)
        self._registry.emit(VisitEventKind.STARTED, root)
        stopped = yield from self._descend(root)
        if stopped:
            LOGGER.info("traversal cancelled: %s", root)
        else:
            LOGGER.info("traversal finished: %s", root)
        self._registry.emit(VisitEventKind.FINISHED, root)

    def _descend(self, directory: str) -> Generator[str, None, bool]:
        for file_path in self._list(self._provider.list_files, directory):
            self._registry.emit(VisitEventKind.FILE_FOUND, file_path)
            if self._matches(file_path):
                self._registry.emit(VisitEventKind.FILTERED_FILE_FOUND, file_path)
            if self._token.is_cancelled():
                return True
            yield file_path

        for subdirectory in self._list(self._provider.list_directories, directory):
            self._registry.emit(VisitEventKind.DIRECTORY_FOUND, subdirectory)
            if self._matches(subdirectory):
                self._registry.emit(VisitEventKind.FILTERED_DIRECTORY_FOUND, subdirectory)
            if (yield from self._descend(subdirectory)):
                return True
        return False

    def _list(self, lister: Callable[[str], List[str]], directory: str) -> List[str]:
        try:
            return lister(directory)
        except OSError as exc:
            LOGGER.warning("listing failed for %s: %s", directory, exc)
            raise FilesystemAccessError(directory, str(exc)) from exc

    def _matches(self, path: str) -> bool:
        try:
            return bool(self._filter(path))
        except Exception as exc:
            LOGGER.warning("filter failed for %s: %s", path, exc)
            raise FilterFailureError(path, str(exc)) from exc

    def _cancel_on_finish(self, event: VisitEvent) -> None:
        self._token.cancel()


__all__ = ["FileSystemVisitor"]
