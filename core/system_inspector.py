"""System inspection helpers for basic runtime diagnostics."""

from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

from os_windows.base_controller import BaseWindowController


def inspect_system(controller: BaseWindowController) -> dict[str, str | bool]:
    """Return lightweight host information and window backend status."""
    return {
        "platform": platform.platform(),
        "sys_platform": sys.platform,
        "python_version": sys.version.split()[0],
        "cwd": str(Path.cwd()),
        "display": os.environ.get("DISPLAY", ""),
        "window_backend": controller.platform_name,
        "backend_available": controller.is_available(),
    }
