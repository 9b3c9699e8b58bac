"""
Morse CLI - Encode text, play it, or export it as audio.
"""

import logging
import sys

import click

from . import SAMPLE_RATE, TONE_FREQ, WPM
from .errors import LookupFailure
from .player import MorsePlayer
from .sanitize import escape as escape_text
from .transcoder import decode, encode


def _encode_or_exit(text: str, escape: bool, turkish: bool):
    if escape:
        text = escape_text(text)

    try:
        return encode(text, turkish=turkish)
    except LookupFailure as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("Hint: use --escape to strip unsupported characters", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output with detailed logging",
)
def main(verbose: bool):
    """
    Convert text to International Morse code and back.

    Examples:

        morse encode "sos"

        morse play "cq cq" -o cq.wav

        morse escape "The Quick & Brown Fox..."
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


@main.command("encode")
@click.argument("text")
@click.option(
    "-e", "--escape",
    is_flag=True,
    help="Strip unsupported characters before encoding",
)
@click.option(
    "--turkish",
    is_flag=True,
    help="Use Turkish case folding for 'I'",
)
def encode_cmd(text: str, escape: bool, turkish: bool):
    """Print the Morse transcription of TEXT."""
    click.echo(str(_encode_or_exit(text, escape, turkish)))


@main.command("roundtrip")
@click.argument("text")
@click.option(
    "-e", "--escape",
    is_flag=True,
    help="Strip unsupported characters before encoding",
)
def roundtrip_cmd(text: str, escape: bool):
    """Encode TEXT, decode it again and print both."""
    transcript = _encode_or_exit(text, escape, turkish=False)
    click.echo(f"Encoded: {transcript}")
    click.echo(f"Decoded: {decode(transcript)}")


@main.command("escape")
@click.argument("text")
def escape_cmd(text: str):
    """Print TEXT with unsupported characters removed."""
    click.echo(escape_text(text))


@main.command("play")
@click.argument("text")
@click.option(
    "-o", "--output",
    type=click.Path(),
    help="Write a WAV file instead of playing",
)
@click.option(
    "-e", "--escape",
    is_flag=True,
    help="Strip unsupported characters before encoding",
)
@click.option(
    "-a", "--amplitude",
    type=float,
    default=0.7,
    help="Amplitude 0.0-1.0 (default: 0.7)",
)
@click.option(
    "-s", "--sample-rate",
    type=int,
    default=SAMPLE_RATE,
    help=f"Sample rate in Hz (default: {SAMPLE_RATE})",
)
def play_cmd(text: str, output: str | None, escape: bool, amplitude: float, sample_rate: int):
    """
    Play TEXT as Morse tones, or write it to a WAV file.

    Tone and speed are fixed at the standard 800 Hz and 10 WPM.
    """
    transcript = _encode_or_exit(text, escape, turkish=False)
    try:
        player = MorsePlayer(
            sample_rate=sample_rate,
            tone_freq=TONE_FREQ,
            wpm=WPM,
            amplitude=amplitude,
        )

        if output:
            player.write(transcript, output)
            click.echo(f"✓ Generated {output}")
        else:
            click.echo(str(transcript))
            player.play(transcript)
    except KeyboardInterrupt:
        click.echo("\n\nStopped.")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("devices")
def devices_cmd():
    """List available audio output devices."""
    import sounddevice as sd

    click.echo("Audio Output Devices:")
    click.echo("-" * 60)
    for i, dev in enumerate(sd.query_devices()):
        if dev['max_output_channels'] > 0:
            click.echo(f"  [{i}] {dev['name']}")


if __name__ == "__main__":
    main()
