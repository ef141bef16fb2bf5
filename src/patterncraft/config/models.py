"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, patterncraft.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from patterncraft.domain.report import ReportStyle
from patterncraft.domain.severity import Severity, parse_severity


class JournalConfig(BaseModel):
    """[journal] section."""

    model_config = {"frozen": True}

    path: str = "logs.txt"
    min_severity: Severity = Severity.INFO

    @field_validator("min_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_severity(value)
        return value


class StyleConfig(BaseModel):
    """[report.style] section."""

    model_config = {"frozen": True}

    background_color: str = "white"
    font_color: str = "black"
    font_size: int = Field(default=12, gt=0)

    def to_style(
        self,
        *,
        background_color: str | None = None,
        font_color: str | None = None,
        font_size: int | None = None,
    ) -> ReportStyle:
        """Build a ReportStyle, letting each explicit argument override its default."""
        return ReportStyle(
            background_color=(
                background_color if background_color is not None else self.background_color
            ),
            font_color=font_color if font_color is not None else self.font_color,
            font_size=font_size if font_size is not None else self.font_size,
        )


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    style: StyleConfig = Field(default_factory=StyleConfig)


class PcConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    journal: JournalConfig = Field(default_factory=JournalConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
