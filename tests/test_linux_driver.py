from pathlib import Path

import pytest

from thermal_print.base_driver import PrintRequest
from thermal_print.errors import PayloadFileError, ProcessSpawnError
from thermal_print.executor import ProcessOutput
from thermal_print.platforms import LinuxPrinterDriver, MacPrinterDriver


def test_list_printers_flags_default(fake_runner):
    runner = fake_runner(
        ProcessOutput(0, "system default destination: Receipt_80\n"),
        ProcessOutput(0, "printer Kitchen is idle.\nprinter Receipt_80 now printing Receipt_80-3.\n"),
    )
    driver = LinuxPrinterDriver(runner=runner)

    printers = driver.list_printers()

    assert runner.calls == [["lpstat", "-d"], ["lpstat", "-p"]]
    assert [(p.name, p.is_default, p.status) for p in printers] == [
        ("Kitchen", False, "idle"),
        ("Receipt_80", True, "printing"),
    ]


def test_list_printers_zero_printers_is_empty_list(fake_runner):
    runner = fake_runner(
        ProcessOutput(1, "", "lpstat: No system default destination.\n"),
        ProcessOutput(1, "", "lpstat: No destinations added.\n"),
    )
    assert LinuxPrinterDriver(runner=runner).list_printers() == []


def test_list_printers_spawn_failure_propagates():
    def runner(argv, **_kwargs):
        raise ProcessSpawnError("Failed to execute lpstat: not found")

    with pytest.raises(ProcessSpawnError):
        LinuxPrinterDriver(runner=runner).list_printers()


def test_print_html_submits_temp_file_and_cleans_up(fake_runner):
    seen = {}

    def runner(argv, **_kwargs):
        path = Path(argv[-1])
        seen["argv"] = argv
        seen["path"] = path
        seen["content"] = path.read_text(encoding="utf-8")
        return ProcessOutput(0, "request id is Receipt_80-12 (1 file(s))\n")

    driver = LinuxPrinterDriver(lp_path="/usr/bin/lp", runner=runner)
    result = driver.print_html("<h1>Order 12</h1>", PrintRequest(printer="Receipt_80", copies=2))

    assert result.success is True
    assert result.error is None
    assert result.job_id == "Receipt_80-12"
    assert seen["content"] == "<h1>Order 12</h1>"
    assert seen["argv"][:5] == ["/usr/bin/lp", "-d", "Receipt_80", "-n", "2"]
    assert not seen["path"].exists()


def test_print_html_failure_reports_stderr(fake_runner):
    runner = fake_runner(ProcessOutput(1, "", "lp: The printer or class does not exist.\n"))
    result = LinuxPrinterDriver(runner=runner).print_html("x", PrintRequest(printer="Ghost"))

    assert result.success is False
    assert result.error == "lp: The printer or class does not exist."
    assert result.job_id is None


def test_print_html_spawn_failure_raises_and_removes_temp_file():
    seen = []

    def runner(argv, **_kwargs):
        seen.append(Path(argv[-1]))
        raise ProcessSpawnError("Failed to execute lp: not found")

    with pytest.raises(ProcessSpawnError):
        LinuxPrinterDriver(runner=runner).print_html("x", PrintRequest())
    assert seen and not seen[0].exists()


def test_mac_driver_shares_cups_behavior(fake_runner):
    runner = fake_runner(ProcessOutput(0, "request id is P-1 (1 file(s))"))
    driver = MacPrinterDriver(runner=runner)

    assert driver.name == "macos_cups"
    assert driver.print_html("x", PrintRequest()).job_id == "P-1"
    assert runner.calls[0][0] == "lp"


def test_print_html_unencodable_payload_raises_before_spawn(monkeypatch, tmp_path, fake_runner):
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
    runner = fake_runner()

    with pytest.raises(PayloadFileError):
        LinuxPrinterDriver(runner=runner).print_html("a\ud800b", PrintRequest())
    assert runner.calls == []
    assert list(tmp_path.glob("print_*.html")) == []


def test_print_html_nul_in_printer_name_raises_spawn_error(monkeypatch, tmp_path):
    monkeypatch.setattr("tempfile.tempdir", str(tmp_path))

    def fake_run(cmd, capture_output, creationflags):
        if any("\x00" in part for part in cmd):
            raise ValueError("embedded null byte")
        raise AssertionError("unexpected command")

    monkeypatch.setattr("subprocess.run", fake_run)

    with pytest.raises(ProcessSpawnError):
        LinuxPrinterDriver().print_html("x", PrintRequest(printer="P\x00Q"))
    assert list(tmp_path.glob("print_*.html")) == []
