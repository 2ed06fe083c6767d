"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import WordbatchConfig

PROJECT_CONFIG = "wordbatch.yaml"

# ${VAR} or ${VAR:-fallback}
_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [Path(PROJECT_CONFIG), Path.home() / ".wordbatch" / "config.yaml"]
    if cli_path:
        explicit = Path(cli_path)
        if not explicit.exists():
            raise ValueError(f"Config file not found: {cli_path}")
        paths.insert(0, explicit)
    return paths


def _read_config(path: Path) -> WordbatchConfig | None:
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")

    try:
        return WordbatchConfig.model_validate(_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def load_config(cli_path: str | None = None) -> WordbatchConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    Empty files are passed over so the next candidate still applies.
    """
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        config = _read_config(path)
        if config is not None:
            return config
    return WordbatchConfig()


def _expand_env_vars(obj: object) -> object:
    """Expand ${VAR} and ${VAR:-fallback} references in nested strings."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), obj)
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


# Default YAML template for `wordbatch config init`
DEFAULT_CONFIG_TEMPLATE = """\
# wordbatch.yaml

# Word automation
automation:
  backend: "com"               # com (Windows, pywin32)
  prog_id: "Word.Application"
  dispatch: "new"              # new (private instance) | shared (attach to running Word)
  visible: false

# Conversion defaults (CLI options override these)
conversion:
  target_format: "default"     # default | pdf | xps | html | rtf
  include: "*.doc"             # glob used in directory mode
  recurse: false
  overwrite: false
  reuse_instance: false        # one Word instance for the whole batch
  # output_dir: "${WORDBATCH_OUT:-converted}"  # mirror outputs here instead of beside the sources

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
