"""Window controller factory."""

from __future__ import annotations

import sys
from typing import Any

from os_windows.base_controller import BaseWindowController
from os_windows.linux_controller import LinuxController
from os_windows.macos_controller import MacOSController
from os_windows.windows_controller import WindowsController

CONTROLLERS: dict[str, type[BaseWindowController]] = {
    "macos": MacOSController,
    "windows": WindowsController,
    "linux": LinuxController,
}


def detect_backend(platform: str | None = None) -> str:
    """Map a ``sys.platform`` value to a backend name."""
    platform = platform or sys.platform
    if platform == "darwin":
        return "macos"
    if platform in ("win32", "cygwin"):
        return "windows"
    return "linux"


def build_controller(config: dict[str, Any]) -> BaseWindowController:
    """Build the window controller selected by configuration, defaulting to the host's."""
    windows_cfg = dict(config.get("windows", {}))
    backend = str(windows_cfg.pop("backend", "auto") or "auto").lower()
    if backend == "auto":
        backend = detect_backend()
    controller_cls = CONTROLLERS.get(backend)
    if controller_cls is None:
        raise ValueError(
            f"Unknown window backend '{backend}'. Expected one of: auto, {', '.join(CONTROLLERS)}"
        )
    return controller_cls(settings=windows_cfg)
