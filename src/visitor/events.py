"""알림 리스너 레지스트리./Notification listener registry."""

from __future__ import annotations

import threading
from typing import Dict, List

from .models import Listener, VisitEvent, VisitEventKind


class ListenerRegistry:
    """알림 종류별 리스너 목록을 관리합니다./Keep listeners per notification kind.

    등록 순서대로 동기 호출하며, 호출 직전 목록을 복사하므로 디스패치 중
    등록/해제가 가능합니다./Dispatch is synchronous in registration order over
    a snapshot, so listeners may subscribe or unsubscribe while being called.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: Dict[VisitEventKind, List[Listener]] = {
            kind: [] for kind in VisitEventKind
        }

    def subscribe(self, kind: VisitEventKind, listener: Listener) -> None:
        """리스너를 등록합니다./Register a listener."""

        with self._lock:
            self._listeners[VisitEventKind(kind)].append(listener)

    def unsubscribe(self, kind: VisitEventKind, listener: Listener) -> bool:
        """리스너를 해제합니다./Remove a listener; return False if absent."""

        with self._lock:
            listeners = self._listeners[VisitEventKind(kind)]
            try:
                listeners.remove(listener)
            except ValueError:
                return False
            return True

    def listeners(self, kind: VisitEventKind) -> tuple[Listener, ...]:
        with self._lock:
            return tuple(self._listeners[VisitEventKind(kind)])

    def emit(self, kind: VisitEventKind, path: str) -> None:
        """알림을 발행합니다./Dispatch a notification to every listener."""

        snapshot = self.listeners(kind)
        if not snapshot:
            return
        event = VisitEvent(kind=kind, path=path)
        for listener in snapshot:
            listener(event)
