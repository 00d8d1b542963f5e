"""Turn raw print command output into PrinterInfo / PrintResult values."""

from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional

from .base_driver import PrintResult, PrinterInfo
from .errors import ResponseParseError
from .executor import ProcessOutput

logger = logging.getLogger(__name__)

PRINTER_LINE_MARKER = "printer "
JOB_ID_MARKER = "request id is "

# First match wins.
_STATUS_KEYWORDS = ("idle", "printing", "disabled")


def parse_default_printer(text: str) -> str:
    """
    Extract the default destination from `lpstat -d` output.

    sample: "system default destination: HP_LaserJet"
    """
    _, sep, rest = text.partition(":")
    if not sep:
        return ""
    return rest.strip()


def parse_printer_status(text: str) -> Optional[str]:
    for keyword in _STATUS_KEYWORDS:
        if keyword in text:
            return keyword
    return None


def parse_lpstat_printers(text: str, default_name: str = "") -> List[PrinterInfo]:
    """
    Parse `lpstat -p` output.

    sample: "printer Receipt_80 is idle.  enabled since Mon 01 Jan 2024"
    """
    printers: List[PrinterInfo] = []
    for line in text.splitlines():
        if not line.startswith(PRINTER_LINE_MARKER):
            continue
        parts = line.split(None, 2)
        if len(parts) < 2:
            continue
        name = parts[1]
        remainder = parts[2] if len(parts) > 2 else ""
        printers.append(
            PrinterInfo(
                name=name,
                is_default=bool(default_name) and name == default_name,
                description=None,
                status=parse_printer_status(remainder),
            )
        )
    logger.debug("Parsed %s printer(s) from lpstat output", len(printers))
    return printers


def _printer_from_record(record: object, raw_output: str) -> PrinterInfo:
    if not isinstance(record, dict):
        raise ResponseParseError(
            f"Failed to parse printer list: unexpected record {record!r} - Output: {raw_output}",
            raw_output,
        )
    name = record.get("Name")
    if not isinstance(name, str) or not name:
        raise ResponseParseError(
            f"Failed to parse printer list: record without Name - Output: {raw_output}",
            raw_output,
        )
    driver_name = record.get("DriverName")
    return PrinterInfo(
        name=name,
        is_default=bool(record.get("Default") or False),
        description=str(driver_name) if driver_name else None,
        status=None,
    )


def parse_powershell_printers(text: str) -> List[PrinterInfo]:
    """
    Parse `Get-Printer | ConvertTo-Json` output.

    ConvertTo-Json emits a bare object instead of an array when exactly one
    printer exists, so both shapes are accepted.
    """
    if not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(
            f"Failed to parse printer list: {exc} - Output: {text}",
            text,
        ) from exc

    records: List[Dict[str, object]]
    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        records = [data]
    else:
        raise ResponseParseError(
            f"Failed to parse printer list: expected array or object - Output: {text}",
            text,
        )
    return [_printer_from_record(record, text) for record in records]


def parse_job_id(stdout: str) -> Optional[str]:
    """
    Extract the CUPS job id.

    sample: "request id is Receipt_80-123 (1 file(s))"
    """
    _, sep, rest = stdout.partition(JOB_ID_MARKER)
    if not sep:
        return None
    tokens = rest.split()
    return tokens[0] if tokens else None


def parse_submission(output: ProcessOutput, *, extract_job_id: bool = True) -> PrintResult:
    if output.ok:
        job_id = parse_job_id(output.stdout) if extract_job_id else None
        return PrintResult.ok(job_id)
    logger.warning("Print command exited with %s: %s", output.returncode, output.stderr.strip())
    return PrintResult.failed(output.stderr)
