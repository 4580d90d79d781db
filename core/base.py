"""설정 모델 공통 기반(KR). Common base for settings models (EN)."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class VisitorBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


__all__ = ("VisitorBaseModel", "Field")
