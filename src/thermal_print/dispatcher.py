"""Print dispatcher and factory entrypoints."""

from __future__ import annotations

import platform
from typing import List, Optional

from .base_driver import PrintRequest, PrintResult, PrinterDriver, PrinterInfo
from .platforms.linux_driver import LinuxPrinterDriver
from .platforms.mac_driver import MacPrinterDriver
from .platforms.win_driver import WindowsPrinterDriver


def get_printer_driver(system: Optional[str] = None) -> PrinterDriver:
    """Factory for platform-specific print driver."""
    system = (system or platform.system()).lower()
    if system == "windows":
        return WindowsPrinterDriver()
    if system == "darwin":
        return MacPrinterDriver()
    return LinuxPrinterDriver()


class PrintDispatcher:
    """Facade used by application code for listing and printing."""

    def __init__(self, driver: Optional[PrinterDriver] = None):
        self.driver = driver or get_printer_driver()

    def list_printers(self) -> List[PrinterInfo]:
        return self.driver.list_printers()

    def get_default_printer(self) -> Optional[PrinterInfo]:
        """Return the printer flagged default, else the first one listed."""
        printers = self.list_printers()
        for printer in printers:
            if printer.is_default:
                return printer
        return printers[0] if printers else None

    def print_html(self, payload: str, options: Optional[PrintRequest] = None) -> PrintResult:
        normalized = (options or PrintRequest()).normalized()
        return self.driver.print_html(payload, normalized)


def list_printers() -> List[PrinterInfo]:
    return PrintDispatcher().list_printers()


def print_html(payload: str, options: Optional[PrintRequest] = None) -> PrintResult:
    return PrintDispatcher().print_html(payload, options)
