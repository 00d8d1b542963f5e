"""Cross-platform receipt printing entrypoints."""

from .base_driver import PrintRequest, PrintResult, PrinterDriver, PrinterInfo
from .dispatcher import PrintDispatcher, get_printer_driver, list_printers, print_html
from .errors import (
    PayloadFileError,
    PrinterEnumerationError,
    PrintingError,
    ProcessSpawnError,
    ResponseParseError,
)

__all__ = [
    "PrintDispatcher",
    "PrintRequest",
    "PrintResult",
    "PrinterDriver",
    "PrinterInfo",
    "get_printer_driver",
    "list_printers",
    "print_html",
    "PrintingError",
    "ProcessSpawnError",
    "PayloadFileError",
    "PrinterEnumerationError",
    "ResponseParseError",
]
