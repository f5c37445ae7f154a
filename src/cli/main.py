"""Main CLI entry point for the plugin compatibility hooks."""

import sys
from pathlib import Path

import click
from rich.markup import escape

from src import __version__
from src.cli.display import console, show_context, show_error, show_success
from src.core.config.settings import Settings, get_settings
from src.core.exceptions.errors import ConfigurationError, PluginCompatError
from src.core.logger.logger import setup_logging
from src.hooks.base import HookStage
from src.hooks.factory import build_registry
from src.hooks.multi_parent_compile import MultiParentCompileHook
from src.models.context import HookContext, PluginCompatConfig


def build_context(
    settings: Settings,
    plugin_dir: str,
    plugin_name: str | None,
    parent_folder: str | None,
    local_checkout_dir: str | None = None,
    include_plugins: tuple[str, ...] = (),
    maven: str | None = None,
    maven_settings: str | None = None,
    maven_args: tuple[str, ...] = (),
    exclude_hooks: tuple[str, ...] = (),
) -> HookContext:
    """Create the hook context for one plugin from CLI options."""
    path = Path(plugin_dir).absolute()
    config = PluginCompatConfig(
        external_maven=Path(maven) if maven else None,
        maven_settings=Path(maven_settings) if maven_settings else None,
        maven_args=list(maven_args),
        local_checkout_dir=Path(local_checkout_dir).absolute() if local_checkout_dir else None,
        include_plugins=list(include_plugins),
        exclude_hooks=[*settings.hooks.exclude, *exclude_hooks],
    )
    return HookContext(
        config=config,
        plugin_dir=path,
        plugin_name=plugin_name or path.name,
        parent_folder=parent_folder,
    )


def plugin_options(func):
    """Options describing the plugin under test."""
    func = click.option("--parent-folder", help="Enclosing multi-module parent folder")(func)
    func = click.option("--plugin-name", "-n", help="Plugin name (defaults to the directory name)")(func)
    func = click.option(
        "--plugin-dir",
        "-p",
        required=True,
        type=click.Path(exists=True, file_okay=False),
        help="Plugin directory",
    )(func)
    return func


@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML configuration file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="pct-hooks")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Prepare and compile plugins for compatibility testing."""
    try:
        settings = Settings.from_yaml(Path(config_path)) if config_path else get_settings()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    setup_logging(settings.logging, level="DEBUG" if verbose else None)
    ctx.obj = settings


@main.command("compile")
@plugin_options
@click.option("--local-checkout-dir", "-l", type=click.Path(exists=True, file_okay=False), help="Local checkout overriding the plugin sources")
@click.option("--include-plugin", "-i", "include_plugins", multiple=True, help="Plugin under test (repeatable)")
@click.option("--maven", type=click.Path(), help="Maven executable")
@click.option("--maven-settings", type=click.Path(exists=True, dir_okay=False), help="Maven settings.xml")
@click.option("--maven-arg", "maven_args", multiple=True, help="Extra Maven argument (repeatable)")
@click.option("--exclude-hook", "exclude_hooks", multiple=True, help="Hook class name to skip (repeatable)")
@click.pass_obj
def compile_plugin(
    settings: Settings,
    plugin_dir: str,
    plugin_name: str | None,
    parent_folder: str | None,
    local_checkout_dir: str | None,
    include_plugins: tuple[str, ...],
    maven: str | None,
    maven_settings: str | None,
    maven_args: tuple[str, ...],
    exclude_hooks: tuple[str, ...],
) -> None:
    """Run the checkout and compilation hooks for one plugin.

    Example:
        pct-hooks compile --plugin-dir /work/bom-parent/plugin-x --parent-folder bom-parent
    """
    context = build_context(
        settings,
        plugin_dir,
        plugin_name,
        parent_folder,
        local_checkout_dir=local_checkout_dir,
        include_plugins=include_plugins,
        maven=maven,
        maven_settings=maven_settings,
        maven_args=maven_args,
        exclude_hooks=exclude_hooks,
    )
    registry = build_registry(settings)

    try:
        context = registry.run_stage(HookStage.CHECKOUT, context)
        context = registry.run_stage(HookStage.COMPILATION, context)
    except PluginCompatError as e:
        show_error("Compilation Failed", str(e))
        sys.exit(1)

    show_context(context)
    if context.override_default_compile:
        show_success("Success", f"{context.plugin_name} compiled")
    else:
        console.print("[dim]No hook compiled the plugin; default compilation applies.[/]")


@main.command()
@plugin_options
@click.pass_obj
def check(
    settings: Settings,
    plugin_dir: str,
    plugin_name: str | None,
    parent_folder: str | None,
) -> None:
    """Report whether the multi-parent compile hook applies to a plugin."""
    context = build_context(settings, plugin_dir, plugin_name, parent_folder)
    registry = build_registry(settings)

    applies = any(
        hook.check(context)
        for hook in registry.get_hooks_from_stage(HookStage.COMPILATION, context)
        if isinstance(hook, MultiParentCompileHook)
    )
    if applies:
        console.print(f"[green]Multi-parent compile hook applies to {escape(context.plugin_name)}[/]")
    else:
        console.print(f"[yellow]Multi-parent compile hook does not apply to {escape(context.plugin_name)}[/]")


if __name__ == "__main__":
    main()
