"""
Configuration management for run_reporter.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import MISSING, dataclass, field

from run_reporter.core.errors import ConfigurationError

CONFIG_ENV_VAR = "RUN_REPORTER_CONFIG"
DEFAULT_CONFIG_NAME = "run_reporter.toml"

PATH_KEYS = frozenset({"output_dir", "log_file", "config_file"})


def _field_default(f):
    """Return the default value of a dataclass field."""
    if f.default_factory is not MISSING:
        return f.default_factory()
    return f.default


@dataclass
class RenderConfig:
    """Configuration for rendering reports."""

    formats: List[str] = field(default_factory=lambda: ["console"])
    output_dir: Optional[Path] = None

    # Console options; color=None means detect from the output stream
    color: Optional[bool] = None
    verbose: bool = False

    verbosity: int = 0  # 0=warnings, 1=progress, 2=details, 3=debug
    log_file: Optional[Path] = None

    config_file: Optional[Path] = None
    load_file: bool = True

    def __post_init__(self):
        """Post-initialization processing."""
        if self.load_file:
            self._load_config_file()

        if isinstance(self.formats, str):
            self.formats = [f.strip() for f in self.formats.split(",") if f.strip()]
        else:
            self.formats = list(self.formats)
        if not self.formats:
            raise ConfigurationError("At least one report format is required")

        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        if not isinstance(self.verbosity, int) or not 0 <= self.verbosity <= 3:
            raise ConfigurationError(f"verbosity must be between 0 and 3, got {self.verbosity!r}")
        if self.color is not None and not isinstance(self.color, bool):
            raise ConfigurationError(f"color must be true, false or unset, got {self.color!r}")

    def _load_config_file(self) -> None:
        """Load defaults from run_reporter.toml if present.

        Values already set explicitly to something other than the field
        default are kept; the file only fills in defaults.
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if self.config_file is not None:
            self.config_file = Path(self.config_file)
        elif env_path:
            self.config_file = Path(env_path)
        else:
            self.config_file = Path.cwd() / DEFAULT_CONFIG_NAME

        if not self.config_file.exists():
            return

        try:
            try:
                import tomllib  # Python 3.11+
            except ModuleNotFoundError:  # Python 3.8-3.10
                import tomli as tomllib

            data = tomllib.loads(self.config_file.read_text())
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to read config file: {self.config_file}: {e}") from e

        table = data.get("run_reporter") or data.get("tool", {}).get("run_reporter", {})
        if not isinstance(table, dict):
            raise ConfigurationError(f"[run_reporter] in {self.config_file} must be a table")

        defaults = RenderConfig.__dataclass_fields__
        for key, value in table.items():
            if key not in defaults or key in ("config_file", "load_file"):
                raise ConfigurationError(f"Unknown option '{key}' in {self.config_file}")
            if value is None:
                continue
            if getattr(self, key) == _field_default(defaults[key]):
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "formats": list(self.formats),
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "color": self.color,
            "verbose": self.verbose,
            "verbosity": self.verbosity,
            "log_file": str(self.log_file) if self.log_file else None,
            "config_file": str(self.config_file) if self.config_file else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Create configuration from dictionary."""
        data = dict(data)
        for key in PATH_KEYS:
            if key in data and isinstance(data[key], str):
                data[key] = Path(data[key])
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

