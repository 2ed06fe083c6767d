"""Batch conversion subsystem: formats, input discovery and the save-as loop."""

from wordbatch.converter.converter import BatchConverter
from wordbatch.converter.discovery import InvalidPatternError, SourceNotFoundError, find_sources
from wordbatch.converter.formats import (
    SUPPORTED_EXTENSIONS,
    TARGET_FORMATS,
    FormatSpec,
    get_format,
    is_supported,
)
from wordbatch.converter.models import (
    BatchReport,
    ConversionOutcome,
    ExitCode,
    PlannedConversion,
)

__all__ = [
    "BatchConverter",
    "BatchReport",
    "ConversionOutcome",
    "ExitCode",
    "FormatSpec",
    "InvalidPatternError",
    "PlannedConversion",
    "SUPPORTED_EXTENSIONS",
    "SourceNotFoundError",
    "TARGET_FORMATS",
    "find_sources",
    "get_format",
    "is_supported",
]
