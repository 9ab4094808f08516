"""Sound command implementations."""

import time

import click

from keyecho.models import SoundEvent


@click.group(name="sounds")
def sounds_group():
    """Sound output commands."""
    pass


@sounds_group.command(name="list")
def list_sounds():
    """List audio output devices and the source of each cue."""
    from keyecho.audio import SoundBank, get_default_device, list_output_devices
    from keyecho.models import AppConfig

    devices = list_output_devices()
    default_device_id = get_default_device()

    click.echo("Audio output devices:\n")
    if not devices:
        click.echo("No output devices found. Run with --mute to play silently.")
    for device_id, name, host_api in devices:
        if device_id == default_device_id:
            click.echo(f"[{device_id}] {name}  [Default]")
        else:
            click.echo(f"[{device_id}] {name}")
        click.echo(f"    Host API: {host_api}")

    config = AppConfig.load_or_default()
    bank = SoundBank(sample_rate=config.sample_rate, sounds_dir=config.sounds_dir)

    click.echo("\nSound cues:")
    for event in SoundEvent:
        click.echo(f"  {event.value:<10} {bank.source(event)}")


@sounds_group.command(name="test")
@click.argument("event", type=click.Choice([e.value for e in SoundEvent], case_sensitive=False))
def test_sound(event: str):
    """Play one sound cue on the configured device."""
    from keyecho.audio import create_player
    from keyecho.exceptions import KeyEchoError, format_error_for_display
    from keyecho.models import AppConfig

    try:
        player = create_player(AppConfig.load_or_default())
    except KeyEchoError as e:
        message, hint = format_error_for_display(e)
        raise click.ClickException(f"{message}\n{hint}" if hint else message) from e

    sound_event = SoundEvent(event.lower())

    click.echo(f"Playing '{sound_event.value}'...")
    player.play(sound_event)

    # Cues are short; give the non-blocking playback time to finish
    time.sleep(1.5)
    player.stop()
