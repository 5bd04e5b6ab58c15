"""Window manager for listing desktop windows via PyGetWindow."""

from __future__ import annotations

import logging
from typing import Any

try:
    import pygetwindow as gw
except (ImportError, NotImplementedError):  # pygetwindow refuses to import on Linux
    gw = None

from os_windows.base_controller import WindowRecord


class WindowManager:
    """Facade over pygetwindow's window enumeration on Windows."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("lw.window_manager")
        if not gw:
            self.logger.debug("pygetwindow is not installed.")

    @property
    def available(self) -> bool:
        return gw is not None

    def _check_available(self) -> None:
        if not gw:
            raise RuntimeError("Cannot list windows: pygetwindow missing.")

    def list_windows(self, on_screen_only: bool = True) -> list[WindowRecord]:
        """Return one record per top-level window, in enumeration order."""
        self._check_available()
        try:
            windows = gw.getAllWindows()
        except Exception as e:
            self.logger.warning("Failed to list windows: %s", e)
            raise RuntimeError(f"Window enumeration failed: {e}") from e

        records: list[WindowRecord] = []
        for index, window in enumerate(windows):
            minimized = bool(getattr(window, "isMinimized", False))
            if on_screen_only and minimized:
                continue
            records.append(self._to_record(window, index, minimized))
        return records

    @staticmethod
    def _to_record(window: Any, index: int, minimized: bool) -> WindowRecord:
        return WindowRecord(
            title=window.title or "",
            window_id=getattr(window, "_hWnd", None),
            is_onscreen=not minimized,
            bounds={
                "x": window.left,
                "y": window.top,
                "width": window.width,
                "height": window.height,
            },
            index=index,
            platform="windows",
        )
