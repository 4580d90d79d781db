"""명령 예외 정의(KR). Command exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(slots=True)
class CommandError(Exception):
    """CLI 실행 오류를 표현 · Represent a CLI failure outside the traversal.

    구성 파일 오류일 때 ``config_path``에 해당 파일을 담는다 · ``config_path``
    names the offending file for configuration failures.
    """

    message: str
    stage: str | None = None
    config_path: Path | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        text = f"[{self.stage}] {self.message}" if self.stage else self.message
        if self.config_path is not None:
            return f"{text} (config: {self.config_path})"
        return text

    def to_payload(self) -> Dict[str, Any]:
        """JSON 오류 응답 · Build the JSON error payload."""

        payload: Dict[str, Any] = {"error": str(self)}
        if self.stage:
            payload["stage"] = self.stage
        if self.config_path is not None:
            payload["config_path"] = str(self.config_path)
        return payload


__all__ = ["CommandError"]
