"""Batch conversion loop driving the application's save-as."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from wordbatch.automation import (
    ApplicationUnavailableError,
    AutomationError,
    WordApplication,
)
from wordbatch.config.models import ConversionConfig
from wordbatch.converter.formats import FormatSpec, get_format, is_supported
from wordbatch.converter.models import BatchReport, ConversionOutcome, PlannedConversion

logger = logging.getLogger(__name__)


class BatchConverter:
    """Converts files one at a time through a :class:`WordApplication`.

    With ``reuse_instance`` one application serves the whole batch and is
    released once at the end; otherwise each file gets its own instance.
    An application is only started for files that will actually be saved.
    """

    def __init__(
        self,
        config: ConversionConfig,
        app_factory: Callable[[], WordApplication],
    ) -> None:
        self._config = config
        self._app_factory = app_factory
        self.target: FormatSpec = get_format(config.target_format)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def output_path_for(self, source: Path, root: Path | None = None) -> Path:
        """Swap the extension; mirror under ``output_dir`` when configured."""
        if not self._config.output_dir:
            return source.with_suffix(self.target.extension)

        base = root if root is not None and root.is_dir() else source.parent
        try:
            relative = source.relative_to(base)
        except ValueError:
            relative = Path(source.name)
        return (Path(self._config.output_dir) / relative).with_suffix(self.target.extension)

    def check(self, source: Path, root: Path | None = None) -> PlannedConversion:
        """Decide what to do with ``source`` without touching the application."""
        if not is_supported(source):
            return PlannedConversion(
                source_path=str(source),
                action="skip",
                reason=f"unsupported extension {source.suffix or '(none)'!r}",
            )

        output = self.output_path_for(source, root)
        if output.resolve() == source.resolve():
            return PlannedConversion(
                source_path=str(source),
                output_path=str(output),
                action="fail",
                reason="output path is the source file",
            )
        if output.exists():
            if not self._config.overwrite:
                return PlannedConversion(
                    source_path=str(source),
                    output_path=str(output),
                    action="fail",
                    reason="output already exists (use --overwrite)",
                )
            return PlannedConversion(source_path=str(source), output_path=str(output), action="replace")
        return PlannedConversion(source_path=str(source), output_path=str(output), action="convert")

    def plan(self, sources: Iterable[Path], root: Path | None = None) -> list[PlannedConversion]:
        return [self.check(source, root) for source in sources]

    def convert_file(
        self, app: WordApplication, source: Path, root: Path | None = None
    ) -> ConversionOutcome:
        """Convert one file with an already running application."""
        planned = self.check(source, root)
        if planned.action in ("skip", "fail"):
            return self._not_attempted(planned)
        return self._save(app, planned)

    def run(
        self,
        sources: Iterable[Path],
        root: Path | None = None,
        on_outcome: Callable[[ConversionOutcome], None] | None = None,
    ) -> BatchReport:
        """Process every source sequentially and return the counters.

        Raises :class:`ApplicationUnavailableError` if the application cannot
        be started. Any instance already running is released first.
        """
        report = BatchReport()
        shared: WordApplication | None = None
        try:
            for source in sources:
                planned = self.check(source, root)
                if planned.action in ("skip", "fail"):
                    outcome = self._not_attempted(planned)
                elif self._config.reuse_instance:
                    if shared is None:
                        shared = self._start_application()
                    outcome = self._save(shared, planned)
                else:
                    app = self._start_application()
                    try:
                        outcome = self._save(app, planned)
                    finally:
                        self._release(app)
                report.record(outcome)
                if on_outcome is not None:
                    on_outcome(outcome)
        finally:
            if shared is not None:
                self._release(shared)

        logger.debug(
            "batch finished: %d converted, %d failed, %d skipped",
            report.converted, report.failed, report.skipped,
        )
        return report

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _start_application(self) -> WordApplication:
        app = self._app_factory()
        app.start()
        return app

    @staticmethod
    def _release(app: WordApplication) -> None:
        try:
            app.quit()
        except AutomationError as e:
            logger.warning("failed to release application: %s", e)

    @staticmethod
    def _not_attempted(planned: PlannedConversion) -> ConversionOutcome:
        if planned.action == "skip":
            logger.info("skipping %s: %s", planned.source_path, planned.reason)
            status = "skipped"
        else:
            logger.warning("cannot convert %s: %s", planned.source_path, planned.reason)
            status = "failed"
        return ConversionOutcome(
            source_path=planned.source_path,
            output_path=planned.output_path,
            status=status,
            reason=planned.reason,
        )

    def _save(self, app: WordApplication, planned: PlannedConversion) -> ConversionOutcome:
        source = Path(planned.source_path)
        output = Path(planned.output_path or "")
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            with app.open_document(source) as doc:
                # the old output survives a source that Word cannot open
                if planned.action == "replace":
                    output.unlink(missing_ok=True)
                    logger.debug("removed existing %s", output)
                doc.save_as(output, self.target.code)
        except ApplicationUnavailableError:
            raise
        except (AutomationError, OSError) as e:
            logger.warning("failed to convert %s: %s", source, e)
            return ConversionOutcome(
                source_path=str(source),
                output_path=str(output),
                status="failed",
                reason=str(e),
            )

        logger.debug("converted %s -> %s", source, output)
        return ConversionOutcome(
            source_path=str(source),
            output_path=str(output),
            status="converted",
        )
