"""Linux (X11) window enumeration controller."""

from __future__ import annotations

import shutil
import subprocess

from os_windows.base_controller import BaseWindowController, WindowRecord

SUPPORTED_TOOLS = ("wmctrl", "xdotool")


class LinuxController(BaseWindowController):
    """Lists X11 client windows through wmctrl, falling back to xdotool."""

    platform_name = "linux"

    def _tools(self) -> list[str]:
        configured = self.settings.get("linux_tools") or list(SUPPORTED_TOOLS)
        return [tool for tool in configured if tool in SUPPORTED_TOOLS and shutil.which(tool)]

    def is_available(self) -> bool:
        return bool(self._tools())

    def unavailable_reason(self) -> str:
        return "Linux backend requires wmctrl or xdotool on PATH and an X11 display."

    def _run(self, args: list[str], allow_codes: tuple[int, ...] = (0,)) -> str:
        timeout = float(self.settings.get("command_timeout_s", 5.0))
        try:
            proc = subprocess.run(args, capture_output=True, text=True, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            self.logger.warning("%s timed out after %.1fs", args[0], timeout)
            raise RuntimeError(f"{args[0]} timed out after {timeout:.1f}s") from exc
        if proc.returncode not in allow_codes:
            stderr = proc.stderr.strip()
            self.logger.warning("%s failed (%d): %s", " ".join(args), proc.returncode, stderr)
            raise RuntimeError(f"{args[0]} failed with exit code {proc.returncode}: {stderr}")
        return proc.stdout

    def _enumerate(self) -> list[WindowRecord]:
        tool = self._tools()[0]
        if tool == "wmctrl":
            return self._enumerate_wmctrl()
        return self._enumerate_xdotool()

    def _enumerate_wmctrl(self) -> list[WindowRecord]:
        # Columns: id desktop pid x y width height host title
        output = self._run(["wmctrl", "-l", "-p", "-G"])
        records: list[WindowRecord] = []
        for index, line in enumerate(output.splitlines()):
            parts = line.split(None, 8)
            if len(parts) < 8:
                self.logger.debug("Ignoring malformed wmctrl line: %r", line)
                continue
            try:
                record = WindowRecord(
                    title=parts[8].strip() if len(parts) > 8 else "",
                    owner_pid=int(parts[2]) or None,
                    window_id=int(parts[0], 16),
                    bounds={"x": parts[3], "y": parts[4], "width": parts[5], "height": parts[6]},
                    index=index,
                    platform="linux",
                )
            except ValueError:
                self.logger.debug("Ignoring malformed wmctrl line: %r", line)
                continue
            records.append(record)
        self.logger.debug("wmctrl reported %d windows", len(records))
        return records

    def _enumerate_xdotool(self) -> list[WindowRecord]:
        args = ["xdotool", "search"]
        if self.settings.get("on_screen_only", True):
            args.append("--onlyvisible")
        args.extend(["--name", "."])
        # xdotool exits 1 when the search matches nothing.
        output = self._run(args, allow_codes=(0, 1))

        records: list[WindowRecord] = []
        for index, raw_id in enumerate(output.split()):
            try:
                title = self._run(["xdotool", "getwindowname", raw_id]).strip()
            except RuntimeError as exc:
                if isinstance(exc.__cause__, subprocess.TimeoutExpired):
                    raise
                self.logger.debug("Window %s vanished during enumeration", raw_id)
                continue
            records.append(
                WindowRecord(title=title, window_id=int(raw_id), index=index, platform="linux")
            )
        self.logger.debug("xdotool reported %d windows", len(records))
        return records
