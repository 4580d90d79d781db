"""방문자 설정 모델(KR). Visitor configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import field_validator

from src.visitor import (
    FilterPredicate,
    LocalFilesystemProvider,
    accept_all,
    all_of,
    extension_filter,
    glob_filter,
)

from .base import Field, VisitorBaseModel

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class VisitorConfig(VisitorBaseModel):
    """순회 설정 전체를 표현 · Represent complete traversal settings."""

    root: Path = Field(default_factory=lambda: Path("."))
    patterns: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()
    sort_entries: bool = True
    follow_symlinks: bool = False
    cancel_on_finish: bool = True
    log_file: Path = Field(default_factory=lambda: Path(".cache/visit.log"))
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, config_file: Path) -> "VisitorConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())

    def build_filter(self) -> FilterPredicate:
        """패턴/확장자로 필터 생성 · Build filter from patterns and extensions."""

        predicates = []
        if self.patterns:
            predicates.append(glob_filter(self.patterns))
        if self.extensions:
            predicates.append(extension_filter(self.extensions))
        if not predicates:
            return accept_all
        if len(predicates) == 1:
            return predicates[0]
        return all_of(*predicates)

    def build_provider(self) -> LocalFilesystemProvider:
        """목록 제공자 생성 · Build the directory listing provider."""

        return LocalFilesystemProvider(
            sort_entries=self.sort_entries, follow_symlinks=self.follow_symlinks
        )


__all__ = ["VisitorConfig"]
