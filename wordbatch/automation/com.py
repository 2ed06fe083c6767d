"""Word automation over COM using pywin32."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from wordbatch.automation.base import WordApplication, WordDocument
from wordbatch.automation.models import ApplicationUnavailableError, AutomationError
from wordbatch.config.models import AutomationConfig

logger = logging.getLogger(__name__)

try:
    import pythoncom
    import pywintypes
    import win32com.client
except ImportError:
    pythoncom = None  # type: ignore[assignment]
    pywintypes = None  # type: ignore[assignment]
    win32com = None  # type: ignore[assignment]
    logger.debug("pywin32 not installed; COM automation disabled")

WD_ALERTS_NONE = 0
WD_DO_NOT_SAVE_CHANGES = 0


def _com_errors() -> tuple[type[BaseException], ...]:
    if pywintypes is None:
        return ()
    return (pywintypes.com_error,)


class ComWordDocument(WordDocument):
    """Document handle backed by a COM ``Document`` object."""

    def __init__(self, path: Path, document: Any) -> None:
        super().__init__(path)
        self._doc = document

    def save_as(self, path: Path, file_format: int) -> None:
        target = str(path.absolute())
        try:
            try:
                self._doc.SaveAs2(FileName=target, FileFormat=file_format)
            except AttributeError:
                # Word 2007 and older lack SaveAs2
                self._doc.SaveAs(FileName=target, FileFormat=file_format)
        except (AttributeError, *_com_errors()) as e:
            raise AutomationError("save", e) from e
        logger.debug("saved %s as format %d -> %s", self.path, file_format, target)

    def _close(self) -> None:
        doc, self._doc = self._doc, None
        try:
            doc.Close(SaveChanges=WD_DO_NOT_SAVE_CHANGES)
        except _com_errors() as e:
            raise AutomationError("close", e) from e


class ComWordApplication(WordApplication):
    """One Word instance driven through ``win32com.client``.

    COM is initialised for the calling thread on start and released on quit.
    """

    def __init__(self, config: AutomationConfig) -> None:
        super().__init__()
        self._config = config
        self._app: Any = None
        self._com_initialized = False

    def _start(self) -> None:
        if win32com is None:
            raise ApplicationUnavailableError("pywin32 is not installed")

        dispatch = (
            win32com.client.DispatchEx
            if self._config.dispatch == "new"
            else win32com.client.Dispatch
        )
        try:
            pythoncom.CoInitialize()
            self._com_initialized = True
            app = dispatch(self._config.prog_id)
            app.Visible = self._config.visible
            app.DisplayAlerts = WD_ALERTS_NONE
        except _com_errors() as e:
            self._uninitialize()
            raise ApplicationUnavailableError(e) from e
        self._app = app
        logger.debug("started %s (%s dispatch)", self._config.prog_id, self._config.dispatch)

    def open_document(self, path: Path) -> ComWordDocument:
        if self._app is None:
            raise AutomationError("open", "application is not running")
        try:
            doc = self._app.Documents.Open(
                FileName=str(path.absolute()),
                ConfirmConversions=False,
                ReadOnly=True,
                AddToRecentFiles=False,
                Visible=False,
            )
        except _com_errors() as e:
            raise AutomationError("open", e) from e
        return ComWordDocument(path, doc)

    def _quit(self) -> None:
        app, self._app = self._app, None
        try:
            if app is not None:
                app.Quit(SaveChanges=WD_DO_NOT_SAVE_CHANGES)
                logger.debug("quit %s", self._config.prog_id)
        except _com_errors() as e:
            raise AutomationError("quit", e) from e
        finally:
            self._uninitialize()

    def _uninitialize(self) -> None:
        if self._com_initialized:
            self._com_initialized = False
            pythoncom.CoUninitialize()
