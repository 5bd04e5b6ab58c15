"""CLI behavior tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from os_windows.base_controller import WindowListingUnavailable
from ui.cli.cli import app

runner = CliRunner()


def test_list_prints_numbered_titles(isolated_env: Path, use_controller, static_controller, sample_records) -> None:
    use_controller(static_controller(sample_records))

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Found 2 windows:", "  1: Inbox", "  2: Dock"]


def test_records_prints_json(isolated_env: Path, use_controller, static_controller, sample_records) -> None:
    use_controller(static_controller(sample_records))

    result = runner.invoke(app, ["records"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["window_id"] for item in payload] == [42, 7]
    assert payload[0]["owner_name"] == "Mail"


def test_list_reports_unavailable_backend(isolated_env: Path, use_controller, static_controller) -> None:
    use_controller(static_controller([], error=WindowListingUnavailable("no backend here")))

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "error: no backend here" in result.output


def test_info_reports_backend(isolated_env: Path, use_controller, static_controller) -> None:
    use_controller(static_controller([], available=False))

    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["window_backend"] == "static"
    assert payload["backend_available"] is False


def test_config_show_uses_root_option(isolated_env: Path, tmp_path: Path) -> None:
    root = tmp_path / "alt"
    (root / "config").mkdir(parents=True)
    (root / "config" / "default.yaml").write_text("windows:\n  backend: linux\n", encoding="utf-8")

    result = runner.invoke(app, ["--root", str(root), "config", "show"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["windows"]["backend"] == "linux"


def test_bad_backend_exits_with_error(isolated_env: Path) -> None:
    (isolated_env / "config").mkdir()
    (isolated_env / "config" / "default.yaml").write_text("windows:\n  backend: wayland\n", encoding="utf-8")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "Unknown window backend" in result.output


def test_bad_log_level_exits_with_error(isolated_env: Path, use_controller, static_controller) -> None:
    use_controller(static_controller([]))

    result = runner.invoke(app, ["--log-level", "chatty", "list"])

    assert result.exit_code == 1
    assert "Unknown log level" in result.output


def test_malformed_config_exits_with_error(isolated_env: Path) -> None:
    (isolated_env / "config").mkdir()
    (isolated_env / "config" / "default.yaml").write_text("windows: [unclosed\n", encoding="utf-8")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "error: Invalid YAML" in result.output
