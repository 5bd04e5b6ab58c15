"""Top-level application orchestrator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.policy_runtime import load_effective_config
from os_windows.base_controller import BaseWindowController
from os_windows.controller_factory import build_controller


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    controller: BaseWindowController


class Orchestrator:
    """Loads configuration and wires the window controller for the host."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(os.environ.get("LW_CONFIG_ROOT") or Path.cwd())
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        return RuntimeBundle(config=config, controller=build_controller(config))
