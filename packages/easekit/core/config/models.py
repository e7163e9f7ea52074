"""Configuration models for easekit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from easekit.core.curves.library import GENERATORS, Catalogue


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log records")


class CustomCurveConfig(BaseModel):
    """A curve declared in configuration and built from a named generator.

    Attributes:
        tag: Tag to register the curve under, e.g. ``"Pow2_5.INOUT"``.
        generator: Key in the generator table, e.g. ``"pow"``.
        params: Keyword arguments for the generator. The bounce family
            takes ``pairs`` as a list of ``[width, height]`` pairs.
        flip: Register the flipped (OUTIN) form of the generated curve.

    Example:
        >>> CustomCurveConfig(tag="Pow2_5.INOUT", generator="pow", params={"power": 2.5})
        CustomCurveConfig(tag='Pow2_5.INOUT', generator='pow', params={'power': 2.5}, flip=False)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str = Field(..., min_length=1)
    generator: str
    params: dict[str, Any] = Field(default_factory=dict)
    flip: bool = False

    @field_validator("generator")
    @classmethod
    def _validate_generator(cls, v: str) -> str:
        if v not in GENERATORS:
            known = ", ".join(sorted(GENERATORS))
            raise ValueError(f"Unknown curve generator '{v}' (known: {known})")
        return v


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    catalogue: Catalogue = Catalogue.INTERPOLATIONS
    custom_curves: list[CustomCurveConfig] = Field(default_factory=list)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("easekit.yaml")
