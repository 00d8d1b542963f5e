"""Printing subsystem exceptions."""


class PrintingError(RuntimeError):
    """Base error for printing subsystem."""


class ProcessSpawnError(PrintingError):
    """Raised when an external print command cannot be started at all."""


class PayloadFileError(PrintingError):
    """Raised when the temporary payload file cannot be created or written."""


class PrinterEnumerationError(PrintingError):
    """Raised when the printer listing command reports failure."""


class ResponseParseError(PrinterEnumerationError):
    """Raised when structured printer listing output has an unexpected shape."""

    def __init__(self, message: str, raw_output: str = ""):
        super().__init__(message)
        self.raw_output = raw_output
