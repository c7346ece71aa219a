"""Runtime configuration: env-driven.

Centralized config using pydantic-settings. Reads from a .env file and
LAUNCHPAD_* environment variables; CLI options override per invocation.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from launchpad.core.classifier import MANIFEST_GRACE_SECONDS


class LaunchpadConfig(BaseSettings):
    """Launchpad configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export LAUNCHPAD_WORKSPACE_ROOT=~/src/suite
        export LAUNCHPAD_EXTENSIONS_DIR=~/.vscode-insiders/extensions
        export LAUNCHPAD_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LAUNCHPAD_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # Workspace layout
    workspace_root: Path = Path(".")
    source_dir_name: str = "src"
    artifact_extension: str = ".vsix"

    # Target runtime
    extensions_dir: Path = Path.home() / ".vscode" / "extensions"
    code_command: str = "code"

    # External commands
    command_timeout_seconds: float | None = None

    # Classification heuristic
    manifest_grace_seconds: float = MANIFEST_GRACE_SECONDS


# Module-level singleton: import as `from launchpad.config import config`
config = LaunchpadConfig()
