"""Enumerate the windows currently open on the host."""

from os_windows.base_controller import WindowBounds, WindowListingUnavailable, WindowRecord


def list_window_records() -> list[WindowRecord]:
    """Return a fresh snapshot of the host's windows as structured records."""
    from core.orchestrator import Orchestrator

    return Orchestrator().build().controller.list_window_records()


def list_windows() -> list[str]:
    """Return a fresh snapshot of the host's window titles, in OS order.

    Untitled windows fall back to their owning application name where the
    platform reports one, and are dropped otherwise.

    Raises:
        WindowListingUnavailable: If no enumeration backend exists on this host.
        RuntimeError: If the OS enumeration call fails.
    """
    from core.orchestrator import Orchestrator

    return Orchestrator().build().controller.list_windows()


__all__ = [
    "WindowBounds",
    "WindowListingUnavailable",
    "WindowRecord",
    "list_window_records",
    "list_windows",
]
