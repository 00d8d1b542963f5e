"""Linux CUPS/lp print driver implementation."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..base_driver import PrintRequest, PrintResult, PrinterDriver, PrinterInfo
from ..commands import (
    build_default_printer_command,
    build_list_printers_command,
    build_lp_command,
)
from ..executor import CommandRunner, run_command
from ..parsers import parse_default_printer, parse_lpstat_printers, parse_submission
from ..payload import temp_payload_file

logger = logging.getLogger(__name__)


class LinuxPrinterDriver(PrinterDriver):
    """CUPS driver built on the `lpstat` and `lp` command line tools."""

    def __init__(
        self,
        lp_path: str = "lp",
        lpstat_path: str = "lpstat",
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self._lp_path = lp_path
        self._lpstat_path = lpstat_path
        self._run = runner or run_command

    @property
    def name(self) -> str:
        return "linux_cups"

    def get_default_printer_name(self) -> str:
        # lpstat exits nonzero with "no system default destination"; that is just "no default".
        output = self._run(build_default_printer_command(self._lpstat_path).argv)
        return parse_default_printer(output.stdout)

    def list_printers(self) -> List[PrinterInfo]:
        default_name = self.get_default_printer_name()
        # "lpstat -p" also exits nonzero when no destinations exist.
        output = self._run(build_list_printers_command(self._lpstat_path).argv)
        printers = parse_lpstat_printers(output.stdout, default_name)
        if not printers:
            logger.info("No printers found via lpstat, this may indicate no printers are configured")
        return printers

    def print_html(self, payload: str, options: PrintRequest) -> PrintResult:
        with temp_payload_file(payload, suffix=".html") as path:
            command = build_lp_command(path, options, lp=self._lp_path)
            output = self._run(command.argv)
        return parse_submission(output, extract_job_id=True)
