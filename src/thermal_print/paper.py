"""Thermal paper profiles shared by command builders and HTML styling."""

from __future__ import annotations

from typing import Optional

DEFAULT_PAPER_WIDTH_MM = 80

# CUPS has no stock names for receipt rolls, so the length is a fixed custom size.
MEDIA_DIRECTIVES = {
    80: "media=Custom.80x200mm",
    58: "media=Custom.58x200mm",
}

FIT_TO_PAGE_DIRECTIVE = "fit-to-page"

_STYLED_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<style>
@page {{
    size: {width}mm auto;
    margin: 0;
}}
@media print {{
    body {{
        width: {width}mm;
        margin: 0;
        padding: 2mm;
    }}
}}
</style>
</head>
<body>
{body}
</body>
</html>"""


def normalize_copies(value: int | None) -> int:
    if value is None:
        return 1
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        numeric = 1
    return max(1, numeric)


def normalize_paper_width(value: int | None) -> int:
    if value is None:
        return DEFAULT_PAPER_WIDTH_MM
    return int(value)


def media_directive(paper_width_mm: int | None) -> Optional[str]:
    """Return the CUPS media option for a known roll width, or None."""
    return MEDIA_DIRECTIVES.get(normalize_paper_width(paper_width_mm))


def wrap_styled_html(payload: str, paper_width_mm: int | None) -> str:
    """Wrap payload in a document whose page size matches the roll width."""
    width = normalize_paper_width(paper_width_mm)
    return _STYLED_HTML_TEMPLATE.format(width=width, body=payload)
