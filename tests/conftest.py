"""Shared fixtures for window listing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from os_windows.base_controller import BaseWindowController, WindowRecord


class StaticController(BaseWindowController):
    """Controller returning a fixed enumeration, or raising a fixed error."""

    platform_name = "static"

    def __init__(self, records: list[WindowRecord], error: Exception | None = None, available: bool = True) -> None:
        super().__init__()
        self.records = records
        self.error = error
        self.available = available

    def is_available(self) -> bool:
        return self.available

    def _enumerate(self) -> list[WindowRecord]:
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def sample_records() -> list[WindowRecord]:
    return [
        WindowRecord(title="Inbox", owner_name="Mail", owner_pid=501, window_id=42, index=0, platform="macos"),
        WindowRecord(title="", owner_name="Dock", window_id=7, layer=20, index=1, platform="macos"),
        WindowRecord(title="", owner_name="", window_id=9, index=2, platform="macos"),
    ]


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config loading at an empty directory with no LW_* overrides."""
    for var in ("LW_WINDOW_BACKEND", "LW_LOG_LEVEL", "LW_CONFIG_ROOT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def use_controller(monkeypatch: pytest.MonkeyPatch):
    """Make the orchestrator hand out the given controller."""

    def _install(controller: BaseWindowController) -> BaseWindowController:
        monkeypatch.setattr("core.orchestrator.build_controller", lambda config: controller)
        return controller

    return _install


@pytest.fixture
def static_controller() -> type[StaticController]:
    return StaticController
