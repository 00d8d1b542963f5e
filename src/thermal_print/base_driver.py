"""Abstract printing driver contracts and shared models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from .paper import normalize_copies, normalize_paper_width

GENERIC_PRINT_FAILURE = "Print command failed"


@dataclass(slots=True)
class PrinterInfo:
    """System printer metadata."""

    name: str
    is_default: bool = False
    description: Optional[str] = None
    status: Optional[str] = None  # idle | printing | disabled | None

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class PrintRequest:
    """Caller-selected print options."""

    printer: Optional[str] = None
    copies: Optional[int] = 1
    silent: Optional[bool] = True  # carried for callers, no dialog path exists yet
    paper_width_mm: Optional[int] = 80  # 80 | 58 | other (printer default media)

    def normalized(self) -> "PrintRequest":
        """Return a normalized copy used by drivers."""
        return PrintRequest(
            printer=(self.printer or "").strip() or None,
            copies=normalize_copies(self.copies),
            silent=True if self.silent is None else bool(self.silent),
            paper_width_mm=normalize_paper_width(self.paper_width_mm),
        )


@dataclass(slots=True)
class PrintResult:
    """Submission outcome for a print job."""

    success: bool
    error: Optional[str] = None
    job_id: Optional[str] = None

    @classmethod
    def ok(cls, job_id: Optional[str] = None) -> "PrintResult":
        return cls(success=True, error=None, job_id=job_id or None)

    @classmethod
    def failed(cls, error: Optional[str]) -> "PrintResult":
        message = (error or "").strip() or GENERIC_PRINT_FAILURE
        return cls(success=False, error=message, job_id=None)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


class PrinterDriver(ABC):
    """Abstract base class for platform-specific print drivers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Driver display name."""

    @abstractmethod
    def list_printers(self) -> List[PrinterInfo]:
        """Enumerate available system printers."""

    @abstractmethod
    def print_html(self, payload: str, options: PrintRequest) -> PrintResult:
        """Submit HTML payload to the platform spooler."""
