"""macOS window enumeration controller backed by Quartz window services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

try:
    import Quartz
except ImportError:
    Quartz = None

from os_windows.base_controller import BaseWindowController, WindowBounds, WindowRecord


class QuartzWindowInfo(BaseModel):
    """One entry of CGWindowListCopyWindowInfo, keyed by the CoreGraphics names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(None, alias="kCGWindowName")
    owner_name: str | None = Field(None, alias="kCGWindowOwnerName")
    owner_pid: int | None = Field(None, alias="kCGWindowOwnerPID")
    number: int | None = Field(None, alias="kCGWindowNumber")
    layer: int = Field(0, alias="kCGWindowLayer")
    alpha: float = Field(1.0, alias="kCGWindowAlpha")
    is_onscreen: bool = Field(False, alias="kCGWindowIsOnscreen")
    bounds: WindowBounds = Field(default_factory=WindowBounds, alias="kCGWindowBounds")
    memory_usage: int = Field(0, alias="kCGWindowMemoryUsage")
    sharing_state: int = Field(0, alias="kCGWindowSharingState")
    store_type: int = Field(0, alias="kCGWindowStoreType")

    def to_record(self, index: int) -> WindowRecord:
        return WindowRecord(
            title=self.name or "",
            owner_name=self.owner_name or "",
            owner_pid=self.owner_pid,
            window_id=self.number,
            layer=self.layer,
            alpha=self.alpha,
            is_onscreen=self.is_onscreen,
            bounds=self.bounds,
            index=index,
            platform="macos",
        )


def _plain(info: Any) -> dict[str, Any]:
    """Convert an NSDictionary (and its nested bounds) to plain dicts."""
    data = dict(info)
    bounds = data.get("kCGWindowBounds")
    if bounds is not None:
        data["kCGWindowBounds"] = dict(bounds)
    return data


class MacOSController(BaseWindowController):
    """Lists windows with CGWindowListCopyWindowInfo.

    Without the Screen Recording permission macOS omits ``kCGWindowName``;
    such windows are labelled by their owning application instead.
    """

    platform_name = "macos"

    def is_available(self) -> bool:
        return Quartz is not None

    def unavailable_reason(self) -> str:
        return "macOS backend requires pyobjc-framework-Quartz."

    def _options(self) -> int:
        if self.settings.get("on_screen_only", True):
            options = Quartz.kCGWindowListOptionOnScreenOnly
        else:
            options = Quartz.kCGWindowListOptionAll
        if self.settings.get("exclude_desktop_elements", True):
            options |= Quartz.kCGWindowListExcludeDesktopElements
        return options

    def _enumerate(self) -> list[WindowRecord]:
        window_list = Quartz.CGWindowListCopyWindowInfo(self._options(), Quartz.kCGNullWindowID)
        if window_list is None:
            self.logger.warning("CGWindowListCopyWindowInfo returned no window list")
            raise RuntimeError("Quartz window enumeration failed.")

        self.logger.debug("Quartz reported %d windows", len(window_list))
        records: list[WindowRecord] = []
        for index, info in enumerate(window_list):
            if info is None:
                self.logger.debug("Skipping empty window entry %d", index)
                continue
            parsed = QuartzWindowInfo.model_validate(_plain(info))
            records.append(parsed.to_record(index))
        return records
