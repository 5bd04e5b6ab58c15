"""Windows window enumeration controller."""

from __future__ import annotations

from typing import Any

from os_windows.base_controller import BaseWindowController, WindowRecord
from os_windows.window_manager import WindowManager


class WindowsController(BaseWindowController):
    """Lists top-level windows through the pygetwindow-backed WindowManager."""

    platform_name = "windows"

    def __init__(self, settings: dict[str, Any] | None = None) -> None:
        super().__init__(settings)
        self.window_manager = WindowManager()

    def is_available(self) -> bool:
        return self.window_manager.available

    def unavailable_reason(self) -> str:
        return "Windows backend requires pygetwindow (pip install pygetwindow)."

    def _enumerate(self) -> list[WindowRecord]:
        records = self.window_manager.list_windows(
            on_screen_only=bool(self.settings.get("on_screen_only", True))
        )
        self.logger.debug("pygetwindow reported %d windows", len(records))
        return records
