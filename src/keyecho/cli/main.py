"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from keyecho import __version__
from keyecho.models import Difficulty
from keyecho.utils import default_log_path

from .commands import config, sounds_group

logger = logging.getLogger(__name__)

DEBUG_LOG_NAME = "keyecho-debug.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / DEBUG_LOG_NAME
    return default_log_path()


def _level_for(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> int:
    # --log-level only applies together with --log-file
    if log_file:
        return logging.getLevelName(log_level.upper())
    if debug or verbose > 1:
        return logging.DEBUG
    return logging.INFO if verbose else logging.WARNING


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Send log records to a rotating file.

    The TUI owns the terminal, so nothing is logged to stdout or stderr.
    """
    level = _level_for(verbose, debug, log_file, log_level)
    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
    logger.info(f"Logging to {log_path} at {logging.getLevelName(level)}")


def _session_config(config_obj, difficulty: Optional[str], mute: bool, sounds_dir: Optional[Path]):
    """Apply command line overrides; they are never written back to disk."""
    overrides = {
        "default_difficulty": Difficulty(difficulty.lower()) if difficulty else None,
        "sounds_dir": sounds_dir,
        "sound_enabled": False if mute else None,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    return config_obj.model_copy(update=overrides) if overrides else config_obj


def _report_startup_failure(error: Exception, log_path: Path) -> None:
    from keyecho.exceptions import format_error_for_display

    message, hint = format_error_for_display(error)
    rule = "=" * 70
    lines = [rule, f"ERROR: {message}", rule]
    if hint:
        lines += ["", hint]
    lines += ["", f"Full details are in {log_path}", "Run 'keyecho --help' for logging options."]
    click.echo("\n".join(lines), err=True)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="keyecho")
@click.option("-d", "--difficulty", default=None,
              type=click.Choice([d.value for d in Difficulty], case_sensitive=False),
              help="Level to start on (default: from config)")
@click.option("--mute", is_flag=True, help="Play without sound")
@click.option("--sounds-dir", default=None,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Folder of <event>.wav/.flac/.ogg files replacing the built-in cues")
@click.option("-v", "--verbose", count=True, help="More log detail (-v INFO, -vv DEBUG)")
@click.option("--debug", is_flag=True, help=f"DEBUG logging to ./{DEBUG_LOG_NAME}")
@click.option("--log-file", default=None, type=click.Path(path_type=Path),
              help="Write the log here instead of ~/.keyecho/logs")
@click.option("--log-level", default="INFO",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Level used with --log-file (default: INFO)")
def cli(ctx, difficulty, mute, sounds_dir, verbose, debug, log_file, log_level):
    """
    keyecho - a keyboard memory game for the terminal.

    Watch the keys light up, then type them back in the same order.
    Each round adds two keys; clear five rounds to win. One mistake per
    round is forgiven, the second sends you back to round 1.

    \b
    Levels:
      easy    digits
      medium  letters
      hard    digits and letters

    \b
    Examples:
      keyecho                               play with the saved settings
      keyecho -d hard --mute                hard level, no sound
      keyecho --sounds-dir ./cues           use your own cue files
      keyecho sounds list                   show sound outputs
      keyecho config set default_difficulty hard
    """
    if ctx.invoked_subcommand is not None:
        return

    # Imported here so subcommands start without loading Textual
    from keyecho.audio import create_player
    from keyecho.models import AppConfig
    from keyecho.tui import KeyEchoApp

    setup_logging(verbose, debug, log_file, log_level)
    log_path = resolve_log_path(debug, log_file)
    logger.info(f"keyecho {__version__} starting")

    player = None
    try:
        settings = _session_config(AppConfig.load_or_default(), difficulty, mute, sounds_dir)
        player = create_player(settings)
        KeyEchoApp(config=settings, sound=player).run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("keyecho failed to run")
        _report_startup_failure(e, log_path)
        sys.exit(1)
    finally:
        if player is not None:
            player.stop()


cli.add_command(sounds_group)
cli.add_command(config)

if __name__ == "__main__":
    cli()
