"""Hook context models shared across the hook chain."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class PluginCompatConfig(BaseModel):
    """Build configuration owned by the harness and passed through unchanged."""

    external_maven: Path | None = Field(
        default=None,
        description="Maven executable to use instead of the configured default",
    )
    maven_settings: Path | None = Field(
        default=None,
        description="Maven settings.xml passed to every invocation",
    )
    maven_args: list[str] = Field(
        default_factory=list,
        description="Extra Maven arguments",
    )
    local_checkout_dir: Path | None = Field(
        default=None,
        description="Local source checkout overriding the fetched plugin sources",
    )
    include_plugins: list[str] = Field(
        default_factory=list,
        description="Plugins under test in this run",
    )
    exclude_hooks: list[str] = Field(
        default_factory=list,
        description="Hook class names that must not run",
    )

    @property
    def has_multiple_local_plugins(self) -> bool:
        """Return True when more than one plugin is tested from the checkout."""
        return len(self.include_plugins) > 1


class HookContext(BaseModel):
    """Facts about one plugin accumulated across the hook stages.

    The same instance is handed from hook to hook. ``override_default_compile``
    records that a hook already compiled the plugin; it only ever moves from
    False to True within a run.
    """

    config: PluginCompatConfig = Field(default_factory=PluginCompatConfig)
    plugin_dir: Path = Field(description="Plugin project root")
    plugin_name: str = Field(description="Declared plugin name")
    parent_folder: str | None = Field(
        default=None,
        description="Name of the enclosing multi-module parent folder",
    )
    override_default_compile: bool = Field(
        default=False,
        description="Whether compilation was already performed by a hook",
    )

    @field_validator("parent_folder", mode="before")
    @classmethod
    def validate_parent_folder(cls, v: str | None) -> str | None:
        """Treat blank parent folder names as absent."""
        if v is None or not str(v).strip():
            return None
        return v

    @property
    def local_checkout_dir(self) -> Path | None:
        """Return the local checkout override, if any."""
        return self.config.local_checkout_dir

    def mark_compiled(self) -> None:
        """Record that the plugin has been compiled."""
        self.override_default_compile = True
