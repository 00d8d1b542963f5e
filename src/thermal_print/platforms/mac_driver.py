"""macOS print driver implementation (CUPS stack)."""

from __future__ import annotations

from .linux_driver import LinuxPrinterDriver


class MacPrinterDriver(LinuxPrinterDriver):
    """
    macOS ships CUPS, so `lpstat -d`/`lpstat -p` enumeration and `lp`
    submission (media, copies, fit-to-page options and `request id is`
    job ids) behave exactly as on Linux; only the driver name differs.
    """

    @property
    def name(self) -> str:
        return "macos_cups"
