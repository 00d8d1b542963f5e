from typing import List, Sequence

import pytest

from thermal_print.executor import ProcessOutput


class FakeRunner:
    """Records argv lists and replies with queued ProcessOutput values."""

    def __init__(self, *outputs: ProcessOutput):
        self._outputs = list(outputs)
        self.calls: List[List[str]] = []
        self.kwargs: List[dict] = []

    def __call__(self, argv: Sequence[str], **kwargs) -> ProcessOutput:
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        return self._outputs.pop(0) if self._outputs else ProcessOutput(returncode=0)


@pytest.fixture
def fake_runner():
    return FakeRunner
