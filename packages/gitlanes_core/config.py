"""Configuration for gitlanes.

Settings live in a JSON file: ``.gitlanes.json`` in the repository (or any
parent directory), falling back to ``~/.config/gitlanes/config.json``.

Execution Context:
    Library module - imported by the CLI and the TUI client

Dependencies:
    - json: Config file format

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gitlanes_core.colors import DEFAULT_PALETTE_SIZE
from gitlanes_core.legend import DEFAULT_MAX_ENTRIES
from gitlanes_core.legend import DEFAULT_SCAN_ROWS

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


CONFIG_FILE = ".gitlanes.json"
USER_CONFIG_PATH = Path("~/.config/gitlanes/config.json")
DEFAULT_MAX_COMMITS = 500


# ---- Config Class -------------------------------------------------------------------------------------------


@dataclass
class GraphConfig:
    """Graph display settings.

    Attributes:
        version: Config format version.
        max_commits: Size of the commit window read from the repository.
        all_branches: Read every branch and tag instead of HEAD only.
        palette_size: Number of distinct lane colors.
        show_legend: Show the branch legend under the graph.
        legend_scan_rows: Rows scanned for legend entries.
        legend_max_entries: Maximum legend entries.
        unicode: Draw with box-drawing characters instead of ASCII.
    """

    version: str = "1.0"
    max_commits: int = DEFAULT_MAX_COMMITS
    all_branches: bool = True
    palette_size: int = DEFAULT_PALETTE_SIZE
    show_legend: bool = True
    legend_scan_rows: int = DEFAULT_SCAN_ROWS
    legend_max_entries: int = DEFAULT_MAX_ENTRIES
    unicode: bool = True

    def to_dict(
            self,
    ) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization.

        Returns:
            Dictionary representation.
        """
        return asdict(self)

    @classmethod
    def from_dict(
            cls,
            data: dict[str, Any],
    ) -> GraphConfig:
        """Create config from dictionary, ignoring unknown keys.

        Args:
            data: Dictionary with config fields.

        Returns:
            GraphConfig instance.
        """
        defaults = cls()
        return cls(
            version=str(data.get("version", defaults.version)),
            max_commits=int(data.get("max_commits", defaults.max_commits)),
            all_branches=bool(data.get("all_branches", defaults.all_branches)),
            palette_size=int(data.get("palette_size", defaults.palette_size)),
            show_legend=bool(data.get("show_legend", defaults.show_legend)),
            legend_scan_rows=int(data.get("legend_scan_rows", defaults.legend_scan_rows)),
            legend_max_entries=int(data.get("legend_max_entries", defaults.legend_max_entries)),
            unicode=bool(data.get("unicode", defaults.unicode)),
        )

    def save(
            self,
            config_path: Path,
    ) -> None:
        """Save config to file.

        Args:
            config_path: Path to the JSON config file.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load(
            cls,
            config_path: Path,
    ) -> GraphConfig:
        """Load config from file.

        Args:
            config_path: Path to the JSON config file.

        Returns:
            GraphConfig instance.

        Raises:
            RuntimeError: If config file cannot be loaded.
        """
        try:
            data = json.loads(config_path.read_text())
            return cls.from_dict(data)
        except Exception as file_error:
            msg = f"Failed to load config from {config_path}: {file_error}"
            raise RuntimeError(msg) from file_error


# ---- Lookup Functions ---------------------------------------------------------------------------------------


def find_config(
        start_path: Path | str | None = None,
) -> Path | None:
    """Find the config file for a directory.

    Args:
        start_path: Directory to start searching from (defaults to cwd).

    Returns:
        Path of the first config file found, None otherwise.
    """
    current = Path(start_path or Path.cwd()).resolve()

    while True:
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        if current == current.parent:
            break
        current = current.parent

    user_config = USER_CONFIG_PATH.expanduser()
    if user_config.is_file():
        return user_config
    return None


def load_config(
        start_path: Path | str | None = None,
) -> GraphConfig:
    """Effective config for a directory, defaults when no file exists."""
    config_path = find_config(start_path)
    if config_path is None:
        return GraphConfig()
    logger.debug(f"Loading config from {config_path}")
    return GraphConfig.load(config_path)
