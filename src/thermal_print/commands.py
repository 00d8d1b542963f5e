"""Build OS-specific argument lists and scripts for printer commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .base_driver import PrintRequest
from .paper import FIT_TO_PAGE_DIRECTIVE, media_directive, normalize_copies

LIST_PRINTERS_SCRIPT = (
    "Get-Printer | Select-Object Name, DriverName, Default | ConvertTo-Json"
)

# ExecWB(OLECMDID_PRINT, OLECMDEXECOPT_DONTPROMPTUSER)
_AUTOMATION_PRINT_SCRIPT = """
$ie = New-Object -ComObject InternetExplorer.Application
$ie.Visible = $false
$ie.Navigate("{path}")
while ($ie.Busy) {{ Start-Sleep -Milliseconds 100 }}
for ($i = 0; $i -lt {copies}; $i++) {{
    $ie.ExecWB(6, 2)
}}
Start-Sleep -Seconds 2
$ie.Quit()
"""

_VERB_PRINT_SCRIPT = """
Start-Process -FilePath "{path}" -Verb Print -Wait
"""


@dataclass(slots=True, frozen=True)
class CommandSpec:
    """Program name plus ordered arguments."""

    program: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]


def build_default_printer_command(lpstat: str = "lpstat") -> CommandSpec:
    return CommandSpec(lpstat, ("-d",))


def build_list_printers_command(lpstat: str = "lpstat") -> CommandSpec:
    return CommandSpec(lpstat, ("-p",))


def build_lp_command(
    file_path: str | Path,
    request: PrintRequest,
    lp: str = "lp",
) -> CommandSpec:
    """
    Build the `lp` submission for a payload file.

    Printer and copies are only emitted when they differ from the CUPS
    defaults; unknown paper widths get no media option at all.
    """
    args: List[str] = []
    if request.printer:
        args.extend(["-d", request.printer])

    copies = normalize_copies(request.copies)
    if copies > 1:
        args.extend(["-n", str(copies)])

    media = media_directive(request.paper_width_mm)
    if media is not None:
        args.extend(["-o", media])

    args.extend(["-o", FIT_TO_PAGE_DIRECTIVE])
    args.append(str(file_path))
    return CommandSpec(lp, tuple(args))


def build_powershell_list_command(powershell: str = "powershell") -> CommandSpec:
    return CommandSpec(powershell, ("-Command", LIST_PRINTERS_SCRIPT))


def escape_script_path(path: str | Path) -> str:
    """Escape a path for interpolation inside a double-quoted PowerShell string."""
    text = str(path)
    text = text.replace("`", "``")
    text = text.replace('"', '`"')
    text = text.replace("$", "`$")
    return text.replace("\\", "\\\\")


def build_powershell_print_script(file_path: str | Path, request: PrintRequest) -> str:
    """
    Generate the PowerShell body that prints an HTML file.

    A targeted printer goes through browser automation, once per copy.
    Otherwise the shell's Print verb hands the file to the default printer.
    """
    path = escape_script_path(file_path)
    if request.printer:
        return _AUTOMATION_PRINT_SCRIPT.format(
            path=path,
            copies=normalize_copies(request.copies),
        )
    return _VERB_PRINT_SCRIPT.format(path=path)


def build_powershell_print_command(script: str, powershell: str = "powershell") -> CommandSpec:
    return CommandSpec(powershell, ("-Command", script))
