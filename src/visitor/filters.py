"""기본 필터 함수 모음./Ready-made filter predicates."""

from __future__ import annotations

import fnmatch
import os
import re
from typing import Iterable

from .models import FilterPredicate


def accept_all(path: str) -> bool:
    """모든 경로를 허용합니다./Match every path."""

    return True


def glob_filter(patterns: Iterable[str]) -> FilterPredicate:
    """이름 또는 전체 경로 글롭 매칭./Match entry name or full path against globs.

    패턴이 없으면 모두 허용합니다./An empty pattern list matches everything.
    """

    compiled = tuple(patterns)
    if not compiled:
        return accept_all

    def _match(path: str) -> bool:
        name = os.path.basename(path)
        posix = path.replace(os.sep, "/")
        return any(
            fnmatch.fnmatchcase(name, pattern) or fnmatch.fnmatchcase(posix, pattern)
            for pattern in compiled
        )

    return _match


def extension_filter(extensions: Iterable[str]) -> FilterPredicate:
    """확장자 매칭(대소문자 무시)./Match by extension, case-insensitive."""

    allowed = {
        ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions if ext
    }
    if not allowed:
        return accept_all

    def _match(path: str) -> bool:
        return os.path.splitext(path)[1].lower() in allowed

    return _match


def regex_filter(pattern: str, *, flags: int = 0) -> FilterPredicate:
    """정규식 검색 매칭./Match when ``pattern`` is found in the path."""

    compiled = re.compile(pattern, flags)

    def _match(path: str) -> bool:
        return compiled.search(path) is not None

    return _match


def all_of(*predicates: FilterPredicate) -> FilterPredicate:
    """모든 조건을 만족해야 매칭./Match only when every predicate matches."""

    def _match(path: str) -> bool:
        return all(predicate(path) for predicate in predicates)

    return _match


__all__ = ["accept_all", "all_of", "extension_filter", "glob_filter", "regex_filter"]
