import logging
import time
import typing

import mido

logger = logging.getLogger(__name__)

def open_output_device (device_name: str) -> typing.Optional[typing.Any]:
    """
    Open a named MIDI output for auditioning converted notes.

    If the precise name is not found, this falls back to the first available output
    and logs a warning, which keeps configs portable across machines where the port
    names differ slightly.

    Returns:
        The opened mido output port, or None when no output could be opened.
    """
    try:
        outputs = mido.get_output_names()
        logger.info(f"Available MIDI outputs: {outputs}")

        if not outputs:
            logger.error("No MIDI output devices found.")
            return None

        target = device_name

        if target not in outputs:
            logger.warning(f"MIDI output device '{target}' not found.")
            target = outputs[0]
            logger.warning(f"Fallback to: {target}")

        midi_out = mido.open_output(target)
        logger.info(f"Opened MIDI output: {target}")
        return midi_out

    except Exception as e:
        logger.error(f"Failed to open MIDI output: {e}")
        return None


def audition_note (midi_out: typing.Any, midi_id: int, channel: int = 0, velocity: int = 100, duration: float = 0.5) -> None:
    """
    Play a single note on `midi_out`: note on, hold for `duration` seconds, note off.

    mido validates the channel, note and velocity ranges when the messages are built.
    """
    midi_out.send(mido.Message('note_on', channel=channel, note=midi_id, velocity=velocity))

    if duration > 0:
        time.sleep(duration)

    midi_out.send(mido.Message('note_off', channel=channel, note=midi_id, velocity=0))
