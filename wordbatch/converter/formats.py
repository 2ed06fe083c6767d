"""Target formats and the Word save-format codes behind them."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class FormatSpec(BaseModel):
    """How one target format is requested from the application."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: int  # WdSaveFormat value
    extension: str
    description: str


TARGET_FORMATS: dict[str, FormatSpec] = {
    "default": FormatSpec(
        name="default", code=16, extension=".docx",
        description="Word document (wdFormatDocumentDefault)",
    ),
    "pdf": FormatSpec(
        name="pdf", code=17, extension=".pdf",
        description="PDF (wdFormatPDF)",
    ),
    "xps": FormatSpec(
        name="xps", code=18, extension=".xps",
        description="XPS (wdFormatXPS)",
    ),
    "html": FormatSpec(
        name="html", code=10, extension=".html",
        description="Filtered HTML (wdFormatFilteredHTML)",
    ),
    "rtf": FormatSpec(
        name="rtf", code=6, extension=".rtf",
        description="Rich Text Format (wdFormatRTF)",
    ),
}

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({
    ".doc", ".dot", ".docx", ".docm", ".dotx", ".dotm",
    ".rtf", ".wps", ".wpd", ".wri", ".odt", ".txt",
})


def get_format(name: str) -> FormatSpec:
    """Look up a target format by name (case-insensitive)."""
    spec = TARGET_FORMATS.get(name.strip().lower())
    if spec is None:
        raise ValueError(
            f"Unsupported target format: {name!r}. "
            f"Supported: {', '.join(TARGET_FORMATS)}"
        )
    return spec


def is_supported(path: str | Path) -> bool:
    """Check whether the application should be asked to open this file."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS
