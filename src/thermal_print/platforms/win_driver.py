"""Windows print driver implementation (PowerShell)."""

from __future__ import annotations

from typing import List, Optional

from ..base_driver import PrintRequest, PrintResult, PrinterDriver, PrinterInfo
from ..commands import (
    build_powershell_list_command,
    build_powershell_print_command,
    build_powershell_print_script,
)
from ..errors import PrinterEnumerationError
from ..executor import CommandRunner, run_command
from ..paper import wrap_styled_html
from ..parsers import parse_powershell_printers, parse_submission
from ..payload import temp_payload_file


class WindowsPrinterDriver(PrinterDriver):
    """Windows bridge; enumeration via Get-Printer, printing via a generated script."""

    def __init__(
        self,
        powershell_path: str = "powershell",
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self._powershell_path = powershell_path
        self._run = runner or run_command

    @property
    def name(self) -> str:
        return "windows_powershell"

    def list_printers(self) -> List[PrinterInfo]:
        command = build_powershell_list_command(self._powershell_path)
        output = self._run(command.argv, hide_window=True)
        if not output.ok:
            raise PrinterEnumerationError(
                f"PowerShell command failed: {output.stderr.strip()}"
            )
        return parse_powershell_printers(output.stdout)

    def print_html(self, payload: str, options: PrintRequest) -> PrintResult:
        styled = wrap_styled_html(payload, options.paper_width_mm)
        with temp_payload_file(styled, suffix=".html") as path:
            script = build_powershell_print_script(path, options)
            command = build_powershell_print_command(script, self._powershell_path)
            output = self._run(command.argv, hide_window=True)
        # Neither script pathway exposes a spooler job id.
        return parse_submission(output, extract_job_id=False)
