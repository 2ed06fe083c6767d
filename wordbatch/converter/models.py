"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, Field


class ExitCode(IntEnum):
    SUCCESS = 0
    APPLICATION_UNAVAILABLE = 1
    SAVE_FAILED = 2
    SOURCE_NOT_FOUND = 3
    INVALID_FILE = 4
    CRITICAL = 5


OutcomeStatus = Literal["converted", "failed", "skipped"]


class ConversionOutcome(BaseModel):
    """Result of processing one input file."""

    source_path: str
    output_path: str | None = None
    status: OutcomeStatus
    reason: str | None = None


class PlannedConversion(BaseModel):
    """What a run would do with one input file (``--dry-run``)."""

    source_path: str
    output_path: str | None = None
    action: Literal["convert", "replace", "fail", "skip"]
    reason: str | None = None


class BatchReport(BaseModel):
    """Counters and per-file outcomes for one run."""

    converted: int = 0
    failed: int = 0
    skipped: int = 0
    outcomes: list[ConversionOutcome] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.converted + self.failed + self.skipped

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.SAVE_FAILED if self.failed else ExitCode.SUCCESS

    def record(self, outcome: ConversionOutcome) -> None:
        if outcome.status == "converted":
            self.converted += 1
        elif outcome.status == "failed":
            self.failed += 1
        else:
            self.skipped += 1
        self.outcomes.append(outcome)
