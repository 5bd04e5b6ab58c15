"""Base interface for per-platform window enumeration controllers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_WINDOW_SETTINGS: dict[str, Any] = {
    "on_screen_only": True,
    "exclude_desktop_elements": True,
    "include_untitled": False,
    "linux_tools": ["wmctrl", "xdotool"],
    "command_timeout_s": 5.0,
}


class WindowListingUnavailable(RuntimeError):
    """Raised when no usable enumeration backend exists on this host."""


class WindowBounds(BaseModel):
    """Window geometry in screen coordinates.

    Accepts both the lowercase field names and the CoreGraphics bounds keys
    (``X``, ``Y``, ``Width``, ``Height``).
    """

    model_config = ConfigDict(populate_by_name=True)

    x: int = Field(0, alias="X")
    y: int = Field(0, alias="Y")
    width: int = Field(0, alias="Width")
    height: int = Field(0, alias="Height")

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        # Quartz reports floats; some window servers hand back numeric strings.
        if isinstance(value, str):
            value = value.strip()
        return int(float(value))


class WindowRecord(BaseModel):
    """One top-level window as reported by the OS."""

    title: str = ""
    owner_name: str = ""
    owner_pid: int | None = None
    window_id: int | None = None
    layer: int = 0
    alpha: float = 1.0
    is_onscreen: bool = True
    bounds: WindowBounds = Field(default_factory=WindowBounds)
    index: int = 0
    platform: str

    @property
    def label(self) -> str:
        """Title when present, otherwise the owning application name."""
        if self.title.strip():
            return self.title
        return self.owner_name


class BaseWindowController(ABC):
    """Abstract window enumeration controller."""

    platform_name = "unknown"

    def __init__(self, settings: dict[str, Any] | None = None) -> None:
        self.settings: dict[str, Any] = {**DEFAULT_WINDOW_SETTINGS, **(settings or {})}
        self.logger = logging.getLogger(f"lw.{self.platform_name}")

    @abstractmethod
    def is_available(self) -> bool:
        """Return True when the backend library or tool can be used."""
        pass

    @abstractmethod
    def _enumerate(self) -> list[WindowRecord]:
        """Return every window the OS reports, in OS order."""
        pass

    def unavailable_reason(self) -> str:
        return f"No window enumeration backend available for {self.platform_name}."

    def list_window_records(self) -> list[WindowRecord]:
        """Enumerate windows, dropping untitled ones unless configured otherwise."""
        if not self.is_available():
            raise WindowListingUnavailable(self.unavailable_reason())
        records = self._enumerate()
        if self.settings.get("include_untitled"):
            return records
        return [record for record in records if record.label.strip()]

    def list_windows(self) -> list[str]:
        """Return the label of every current window."""
        return [record.label for record in self.list_window_records()]
