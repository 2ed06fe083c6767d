from .loader import load_config
from .models import (
    AutomationConfig,
    ConversionConfig,
    WordbatchConfig,
)

__all__ = [
    "AutomationConfig",
    "ConversionConfig",
    "WordbatchConfig",
    "load_config",
]
