"""Config command implementations."""

from enum import Enum
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from keyecho.exceptions import ConfigurationError, format_error_for_display, wrap_pydantic_error
from keyecho.models import AppConfig
from keyecho.utils import default_config_path

# Values accepted for "no value" on optional fields
NONE_VALUES = {"none", "null", "default", "unlimited", ""}

config_path_option = click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.keyecho/config.json)",
)


def _resolve(config_path: Optional[Path]) -> Path:
    return config_path if config_path is not None else default_config_path()


def _load(path: Path) -> AppConfig:
    try:
        return AppConfig.load_or_default(path)
    except ConfigurationError as e:
        message, hint = format_error_for_display(e)
        raise click.ClickException(f"{message}\n{hint}" if hint else message) from e


def _format(value) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


def _display(config: AppConfig) -> None:
    for name, field in AppConfig.model_fields.items():
        click.echo(f"  {name:<24} {_format(getattr(config, name))}")
        if field.description:
            click.echo(f"  {'':<24} {click.style(field.description, dim=True)}")


@click.group(name="config", invoke_without_command=True)
@config_path_option
@click.pass_context
def config(ctx, config_path: Optional[Path]):
    """Show or change keyecho settings."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@config.command()
@config_path_option
@click.pass_context
def show(ctx, config_path: Optional[Path]):
    """Display the current configuration."""
    path = _resolve(config_path or ctx.obj.get("config_path"))
    current = _load(path)

    click.echo(f"Configuration ({path}):\n")
    _display(current)


@config.command(name="set")
@click.argument("field")
@click.argument("value")
@config_path_option
@click.pass_context
def set_value(ctx, field: str, value: str, config_path: Optional[Path]):
    """
    Set FIELD to VALUE and save.

    \b
    Examples:
      keyecho config set default_difficulty hard
      keyecho config set volume 0.8
      keyecho config set max_repeats_per_round unlimited
    """
    path = _resolve(config_path or ctx.obj.get("config_path"))

    if field not in AppConfig.model_fields:
        valid = ", ".join(AppConfig.model_fields)
        raise click.BadParameter(f"Unknown field '{field}'. Valid fields: {valid}", param_hint="FIELD")

    current = _load(path)
    raw: Optional[str] = None if value.strip().lower() in NONE_VALUES else value

    try:
        updated = AppConfig.model_validate({**current.model_dump(), field: raw})
    except ValidationError as e:
        message, hint = format_error_for_display(wrap_pydantic_error(e, str(path)))
        raise click.ClickException(f"{message}\n{hint}" if hint else message) from e

    updated.save(path)
    click.echo(f"Set {field} = {_format(getattr(updated, field))}")


@config.command()
@click.option("--field", "fields", multiple=True, help="Reset only this field (repeatable)")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@config_path_option
@click.pass_context
def reset(ctx, fields: tuple[str, ...], yes: bool, config_path: Optional[Path]):
    """Reset settings to their defaults."""
    path = _resolve(config_path or ctx.obj.get("config_path"))

    unknown = [f for f in fields if f not in AppConfig.model_fields]
    if unknown:
        raise click.BadParameter(f"Unknown field(s): {', '.join(unknown)}", param_hint="--field")

    target = ", ".join(fields) if fields else "all settings"
    if not yes:
        click.confirm(f"Reset {target} to defaults?", abort=True)

    if fields:
        current = _load(path)
        defaults = AppConfig()
        updated = current.model_copy(update={f: getattr(defaults, f) for f in fields})
    else:
        updated = AppConfig()

    updated.save(path)
    click.echo(f"Reset {target}.")


@config.command()
@click.pass_context
def path(ctx):
    """Print the config file location."""
    click.echo(str(_resolve(ctx.obj.get("config_path"))))
