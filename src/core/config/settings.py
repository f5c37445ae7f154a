"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.config.loader import ConfigLoader


class MavenSettings(BaseSettings):
    """Maven invocation settings."""

    model_config = SettingsConfigDict(
        env_prefix="PCT_MAVEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    executable: str = Field(
        default="mvn",
        description="Maven executable used when no external Maven is configured",
    )
    settings_file: Path | None = Field(
        default=None,
        description="Maven settings.xml passed with --settings",
    )
    args: list[str] = Field(
        default_factory=list,
        description="Extra arguments appended to every Maven invocation",
    )
    timeout: int | None = Field(
        default=None,
        ge=1,
        description="Timeout in seconds for a single Maven invocation (None = no limit)",
    )

    @field_validator("settings_file", mode="before")
    @classmethod
    def validate_settings_file(cls, v: str | None) -> Path | None:
        """Validate and convert settings_file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PCT_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class HookSettings(BaseSettings):
    """Hook registry settings."""

    model_config = SettingsConfigDict(
        env_prefix="PCT_HOOKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    multi_parent: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Multi-module parent folder name mapped to the plugins it contains",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Hook class names that are never run",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PCT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    maven: MavenSettings = Field(default_factory=MavenSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    hooks: HookSettings = Field(default_factory=HookSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            maven=MavenSettings(**loader.get_section("maven")),
            logging=LoggingSettings(**loader.get_section("logging")),
            hooks=HookSettings(**loader.get_section("hooks")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Keys present in config/default.yaml win; keys it omits fall back to
        environment variables, .env and field defaults.

        Returns:
            Settings instance.
        """
        default_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"
        if default_path.exists():
            return cls.from_yaml(default_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
