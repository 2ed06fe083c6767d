"""Automation layer for the external word-processing application."""

from wordbatch.automation.base import WordApplication, WordDocument
from wordbatch.automation.com import ComWordApplication
from wordbatch.automation.models import ApplicationUnavailableError, AutomationError
from wordbatch.config.models import AutomationConfig

_BACKEND_MAP: dict[str, type[WordApplication]] = {
    "com": ComWordApplication,
}


def create_application(config: AutomationConfig) -> WordApplication:
    """Create an (unstarted) application handle from config."""
    cls = _BACKEND_MAP.get(config.backend)
    if cls is None:
        raise ValueError(
            f"Unsupported automation backend: {config.backend!r}. "
            f"Supported: {', '.join(_BACKEND_MAP)}"
        )
    return cls(config)


__all__ = [
    "ApplicationUnavailableError",
    "AutomationError",
    "ComWordApplication",
    "WordApplication",
    "WordDocument",
    "create_application",
]
