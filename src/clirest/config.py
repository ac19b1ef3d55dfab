r"""Configuration for documentation generation.

Settings live in TOML, either under ``[tool.clirest]`` in a project's
pyproject.toml or at the top level of a dedicated file:

    [tool.clirest]
    output_dir = "docs/cli"
    extension = "rst"
    header = ".. This file is generated from {basename}, do not edit.\n\n"

``header`` is written at the top of every page; ``{filename}`` and
``{basename}`` are replaced with the page's path and file name.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from clirest.exceptions import ConfigError, DocWriteError
from clirest.models import CommandNode, FilePrepender
from clirest.rest_docs import DEFAULT_EXTENSION, default_link_handler, gen_rest_tree_custom

try:
    import tomli  # type: ignore[import]
except ImportError:
    # stdlib tomllib when tomli is absent
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

logger = logging.getLogger(__name__)


@dataclass
class DocsConfig:
    """Documentation generation settings."""

    output_dir: str = "docs/cli"
    extension: str = DEFAULT_EXTENSION
    header: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocsConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If data is not a table or unknown keys are present
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a table, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        return config

    def validate(self) -> None:
        """Validate config fields.

        Raises:
            ConfigError: If validation fails
        """
        for f in fields(self):
            if not isinstance(getattr(self, f.name), str):
                raise ConfigError(f"Config key '{f.name}' must be a string")

        if not self.output_dir.strip():
            raise ConfigError("Output directory cannot be empty")

        if not self.extension or self.extension.startswith("."):
            raise ConfigError(f"Invalid extension: '{self.extension}' (omit the leading dot)")

        if "/" in self.extension or "\\" in self.extension:
            raise ConfigError(f"Invalid extension: '{self.extension}'")

    def file_prepender(self) -> FilePrepender:
        """Build a prefix callback that renders ``header`` for each page."""
        header = self.header

        def prepend(filename: str) -> str:
            if not header:
                return ""
            return header.replace("{filename}", filename).replace(
                "{basename}", Path(filename).name
            )

        return prepend


class ConfigManager:
    """Load ``DocsConfig`` from TOML."""

    DEFAULT_CONFIG_FILE = Path("pyproject.toml")
    TOOL_TABLE = "clirest"

    @classmethod
    def load_config(cls, custom_path: str | Path | None = None) -> DocsConfig:
        """Load configuration from file.

        Without ``custom_path``, ./pyproject.toml is read if it exists and
        defaults are used otherwise.

        Args:
            custom_path: Config file path (optional)

        Returns:
            DocsConfig object

        Raises:
            ConfigError: If the file is missing (custom path only), unreadable,
                or invalid
        """
        if custom_path is not None:
            config_path = Path(custom_path).expanduser()
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
        else:
            config_path = cls.DEFAULT_CONFIG_FILE
            if not config_path.exists():
                logger.debug("Config file not found, using defaults")
                return DocsConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config: {e}") from e

        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"Invalid config: 'tool' must be a table in {config_path}")

        tool_section = tool.get(cls.TOOL_TABLE)
        if tool_section is not None:
            if not isinstance(tool_section, dict):
                raise ConfigError(
                    f"Invalid config: 'tool.{cls.TOOL_TABLE}' must be a table in {config_path}"
                )
            data = tool_section
        elif config_path.name == "pyproject.toml":
            # pyproject without our table: its other keys are not ours
            data = {}

        logger.debug(f"Loaded config from: {config_path}")
        return DocsConfig.from_dict(data)


def generate_docs(cmd: CommandNode, config: DocsConfig | None = None) -> list[Path]:
    """Generate the page tree for ``cmd`` as configured.

    Creates the output directory if needed.

    Args:
        cmd: Root command
        config: Settings (defaults if omitted)

    Returns:
        Written file paths

    Raises:
        ConfigError: If the config is invalid
        DocWriteError: If the output directory or a page cannot be written
    """
    config = config or DocsConfig()
    config.validate()

    output_dir = Path(config.output_dir).expanduser()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DocWriteError(f"Failed to create output directory: {e}", output_dir) from e

    return gen_rest_tree_custom(
        cmd,
        output_dir,
        config.file_prepender(),
        default_link_handler,
        extension=config.extension,
    )
