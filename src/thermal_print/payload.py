"""Temporary payload files scoped to a single print submission."""

from __future__ import annotations

import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import PayloadFileError

logger = logging.getLogger(__name__)


@contextmanager
def temp_payload_file(content: str, suffix: str = ".html") -> Iterator[Path]:
    """
    Write `content` to a fresh temp file and yield its path.

    The file is removed when the block exits, whether it returns or raises.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PayloadFileError(f"Payload is not encodable as UTF-8: {exc}") from exc

    try:
        tmp = tempfile.NamedTemporaryFile(delete=False, suffix=suffix, prefix="print_")
    except OSError as exc:
        raise PayloadFileError(f"Failed to create temp file: {exc}") from exc

    temp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(data)
    except OSError as exc:
        _remove(temp_path)
        raise PayloadFileError(f"Failed to write payload to temp file: {exc}") from exc

    try:
        yield temp_path
    finally:
        _remove(temp_path)


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove temp payload %s: %s", path, exc)
