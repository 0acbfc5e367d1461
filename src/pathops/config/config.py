"""Configuration management for pathops."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from pathops.config.paths import default_config_path, default_log_dir, default_log_file
from pathops.features.paths.adapters.local import LocalFileSystemProvider
from pathops.features.paths.usecases.path_utility import PathUtility
from pathops.platform.logging import logger, setup_logger

PROVIDER_DEFAULT: Final[str] = "local"
CONSOLE_LOG_LEVEL_DEFAULT: Final[str] = "INFO"
FILE_LOG_LEVEL_DEFAULT: Final[str] = "DEBUG"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def parse_log_level(value: str | int | None, default: int) -> int:
    """Translate a level name such as ``"debug"`` into its ``logging`` value."""

    if isinstance(value, int):
        return value
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


@dataclass
class Config:
    """Package configuration."""

    # Optional rotating log file; relative paths live under default_log_dir()
    log_file: Path | None = _path_field()

    # Write default_log_file() when no log_file is given
    log_to_file: bool = False

    # Handler thresholds, as logging level names
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT
    file_log_level: str = FILE_LOG_LEVEL_DEFAULT

    # Provider backing default_path_utility()
    provider: str = PROVIDER_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths flagged with ``metadata={"path": True}``."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration as commented TOML.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file written.

        Raises:
            OSError: When the directory or the file cannot be written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            content = self._render_toml(config_dict)
            created = PathUtility(LocalFileSystemProvider()).create_file(
                destination, content.encode("utf-8")
            )
            if not created:
                raise OSError(f"Could not write configuration file: {destination}")
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathops configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Enables a rotating log file next to the console output")
        lines.append('# Example: log_file = "/path/to/logs/pathops.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("# Set to true to log to logs/pathops.log (or $PATHOPS_LOG_DIR) without a log_file")
        lines.append(f"log_to_file = {self._format_toml_value(config['log_to_file'])}")
        lines.append("")

        lines.append("# Logging thresholds (DEBUG, INFO, WARNING, ERROR)")
        lines.append(f"console_log_level = {self._format_toml_value(config['console_log_level'])}")
        lines.append(f"file_log_level = {self._format_toml_value(config['file_log_level'])}")
        lines.append("")

        lines.append("# File-system provider used by default_path_utility() (local, memory)")
        lines.append(f"provider = {self._format_toml_value(config['provider'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    def resolved_log_file(self) -> Path | None:
        """Return the log file to write, or ``None`` for console-only logging.

        A relative ``log_file`` is placed under ``default_log_dir()``; with no
        ``log_file``, ``log_to_file`` selects ``default_log_file()``.
        """
        if self.log_file is None:
            return default_log_file() if self.log_to_file else None
        log_file = self.log_file.expanduser()
        if log_file.is_absolute():
            return log_file
        return default_log_dir() / log_file

    def configure_logging(self) -> logging.Logger:
        """Rebuild the shared logger from this configuration."""

        return setup_logger(
            log_file=self.resolved_log_file(),
            console_level=parse_log_level(self.console_log_level, logging.INFO),
            file_level=parse_log_level(self.file_log_level, logging.DEBUG),
        )

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults.

        Args:
            source: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, cached for later calls.
        """
        config_file = source or default_config_path()
        if cls._instance is not None and config_file == cls._loaded_from:
            return cls._instance

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()


__all__ = [
    "CONSOLE_LOG_LEVEL_DEFAULT",
    "Config",
    "FILE_LOG_LEVEL_DEFAULT",
    "PROVIDER_DEFAULT",
    "config",
    "parse_log_level",
]
