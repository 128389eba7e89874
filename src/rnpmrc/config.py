from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# Main Application Config
# =============================================================================


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RNPMRC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # =============================================================================
    # filesystem layout
    # =============================================================================

    home_dir: Optional[Path] = Field(
        default=None,
        description="Home directory holding the config root and the active link. "
        "Defaults to the current user's home directory.",
    )
    config_dir_name: str = Field(
        default=".rnpmrc",
        description="Name of the directory, under the home directory, storing profiles.",
    )
    link_name: str = Field(
        default=".npmrc",
        description="Name of the symlink, under the home directory, to the active profile.",
    )
    profile_prefix: str = Field(
        default=".npmrc.",
        description="File name prefix of every profile file.",
    )

    default_editor: str = Field(
        default="vi",
        description="Editor used by `open` when --editor is not given.",
    )


# Global config instance
cfg = Config()
