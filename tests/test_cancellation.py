"""취소 동작을 검증합니다./Validate cancellation behaviour."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import List

from src.visitor import (
    CancellationToken,
    FileSystemVisitor,
    VisitEvent,
    VisitEventKind,
    accept_all,
)
from tests.fixtures.virtual_fs import InMemoryProvider, bulk_create_files


def test_token_is_shared_and_thread_safe() -> None:
    """다른 스레드에서 취소 가능./Token can be triggered from another thread."""

    token = CancellationToken()
    assert not token.is_cancelled()
    worker = threading.Thread(target=token.cancel)
    worker.start()
    worker.join()
    assert token.is_cancelled()
    token.cancel()
    assert token.is_cancelled()


def test_pre_cancelled_token_yields_empty(token: CancellationToken) -> None:
    """사전 취소 시 빈 결과./A cancelled token yields an empty result."""

    provider = InMemoryProvider(["root/a.txt"])
    visitor = FileSystemVisitor(token, accept_all, provider=provider)
    events: List[VisitEvent] = []
    visitor.subscribe_all(events.append)
    token.cancel()
    assert visitor.enumerate_files("root") == []
    assert events == []
    assert provider.calls == []


def test_cancel_from_listener_stops_after_current_step(token: CancellationToken) -> None:
    """리스너에서 취소 시 이후 파일 없음./Cancelling in a listener stops production."""

    provider = InMemoryProvider(
        ["root/a.txt", "root/b.txt", "root/sub/c.txt", "root/sub/d.txt", "root/e/f.txt"]
    )
    visitor = FileSystemVisitor(token, accept_all, provider=provider)

    def _cancel_on_c(event: VisitEvent) -> None:
        if event.path == "root/sub/c.txt":
            token.cancel()

    visitor.subscribe(VisitEventKind.FILE_FOUND, _cancel_on_c)
    found: List[str] = []
    visitor.subscribe(VisitEventKind.DIRECTORY_FOUND, lambda event: found.append(event.path))
    assert visitor.enumerate_files("root") == ["root/a.txt", "root/b.txt"]
    assert found == ["root/sub"]
    assert ("dirs", "root/sub") not in provider.calls


def test_cancel_from_filtered_listener_excludes_match(token: CancellationToken) -> None:
    """매칭 알림에서 취소하면 해당 파일도 제외./The matching file itself is not produced."""

    provider = InMemoryProvider(["root/a.txt", "root/b.log", "root/c.txt"])
    visitor = FileSystemVisitor(
        token, lambda path: path.endswith(".log"), provider=provider
    )
    visitor.subscribe(VisitEventKind.FILTERED_FILE_FOUND, lambda event: token.cancel())
    assert visitor.enumerate_files("root") == ["root/a.txt"]


def test_cancel_while_consuming_lazily(token: CancellationToken) -> None:
    """소비 중 취소./Cancelling between lazily consumed elements."""

    provider = InMemoryProvider(["root/a.txt", "root/b.txt", "root/sub/c.txt"])
    visitor = FileSystemVisitor(token, accept_all, provider=provider)
    produced: List[str] = []
    for path in visitor.iter_files("root"):
        produced.append(path)
        token.cancel()
    assert produced == ["root/a.txt"]


def test_cancelled_run_still_finishes(token: CancellationToken) -> None:
    """취소된 순회도 종료 알림 발행./A cancelled run still reports finished."""

    provider = InMemoryProvider(["root/a.txt", "root/b.txt"])
    visitor = FileSystemVisitor(token, accept_all, provider=provider)
    finished: List[str] = []
    visitor.subscribe(VisitEventKind.FINISHED, lambda event: finished.append(event.path))
    visitor.subscribe(VisitEventKind.FILE_FOUND, lambda event: token.cancel())
    assert visitor.enumerate_files("root") == []
    assert finished == ["root"]


def test_completed_traversal_spends_token(sample_tree: Path, token: CancellationToken) -> None:
    """정상 종료 후 토큰이 취소됨(1회용)./A finished run cancels the token (single use)."""

    visitor = FileSystemVisitor(token, accept_all)
    first = visitor.enumerate_files(sample_tree)
    assert len(first) == 6
    assert token.is_cancelled()
    assert visitor.enumerate_files(sample_tree) == []


def test_cancel_on_finish_can_be_disabled(sample_tree: Path, token: CancellationToken) -> None:
    """재사용 가능 모드./Reusable visitor when cancel_on_finish is off."""

    visitor = FileSystemVisitor(token, accept_all, cancel_on_finish=False)
    first = visitor.enumerate_files(sample_tree)
    assert not token.is_cancelled()
    assert visitor.enumerate_files(sample_tree) == first


def test_abandoned_iterator_does_not_spend_token(token: CancellationToken) -> None:
    """중도 포기 시 종료 알림 없음./Closing the iterator early skips finished."""

    provider = InMemoryProvider(["root/a.txt", "root/b.txt"])
    visitor = FileSystemVisitor(token, accept_all, provider=provider)
    iterator = visitor.iter_files("root")
    assert next(iterator) == "root/a.txt"
    iterator.close()
    assert not token.is_cancelled()


def test_cancel_from_another_thread_during_iteration(token: CancellationToken) -> None:
    """순회 중 다른 스레드에서 취소./Another thread cancels while files are consumed."""

    provider = InMemoryProvider(
        ["root/f0.txt", "root/f1.txt", "root/f2.txt", "root/f3.txt", "root/sub/g.txt"]
    )
    visitor = FileSystemVisitor(token, accept_all, provider=provider)
    reached = threading.Event()
    cancelled = threading.Event()

    def _canceller() -> None:
        if reached.wait(timeout=5):
            token.cancel()
        cancelled.set()

    def _pause_on_f2(event: VisitEvent) -> None:
        if event.path == "root/f2.txt":
            reached.set()
            cancelled.wait(timeout=5)

    visitor.subscribe(VisitEventKind.FILE_FOUND, _pause_on_f2)
    worker = threading.Thread(target=_canceller)
    worker.start()
    produced: List[str] = []
    for path in visitor.iter_files("root"):
        produced.append(path)
    worker.join(timeout=5)
    assert produced == ["root/f0.txt", "root/f1.txt"]
    assert token.is_cancelled()
    assert ("files", "root/sub") not in provider.calls


def test_cancel_after_n_files_in_large_directory(tmp_path: Path, token: CancellationToken) -> None:
    """대량 디렉터리에서 N개 후 취소./Cancel after N files in a large flat directory."""

    target = tmp_path / "bulk"
    created = list(bulk_create_files(target, 120))
    visitor = FileSystemVisitor(token, accept_all)
    seen: List[str] = []

    def _count(event: VisitEvent) -> None:
        seen.append(event.path)
        if len(seen) > 10:
            token.cancel()

    visitor.subscribe(VisitEventKind.FILE_FOUND, _count)
    result = visitor.enumerate_files(target)
    assert [Path(path).name for path in result] == [path.name for path in created[:10]]
    assert len(seen) == 11
