"""방문자 전용 예외를 정의합니다./Define visitor specific exceptions."""

from __future__ import annotations


class VisitorError(RuntimeError):
    """순회 중 발생한 오류 기본 클래스./Base class for traversal errors."""


class InvalidArgumentError(VisitorError, ValueError):
    """루트 경로가 비어 있음./Raised when the root path is missing or empty."""


class FilesystemAccessError(VisitorError):
    """디렉터리 목록 조회 실패./Listing a directory failed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"cannot list {path}: {message}")
        self.path = path


class FilterFailureError(VisitorError):
    """필터 함수가 예외를 발생시킴./Filter predicate raised."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"filter failed on {path}: {message}")
        self.path = path
