"""Platform drivers: CUPS command line (Linux, macOS) and PowerShell (Windows)."""

from .linux_driver import LinuxPrinterDriver
from .mac_driver import MacPrinterDriver
from .win_driver import WindowsPrinterDriver

__all__ = [
    "LinuxPrinterDriver",
    "MacPrinterDriver",
    "WindowsPrinterDriver",
]
