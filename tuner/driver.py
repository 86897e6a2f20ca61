"""Interactive note-name read loop.

Reads one note name per line, prints its MIDI id (hex) and frequency, and optionally
plays the note on a MIDI output. What happens on a malformed line is a configuration
choice (`DriverConfig.on_error`):

- ``"raise"`` - the `InvalidNoteNameError` propagates out of `run()`.
- ``"skip"`` - the line is logged as a warning and the loop carries on.
"""

import dataclasses
import logging
import os
import typing

import yaml

import tuner.midi_utils
import tuner.notes


logger = logging.getLogger(__name__)


ON_ERROR_MODES: typing.Tuple[str, ...] = ("raise", "skip")


@dataclasses.dataclass
class DriverConfig:

	"""
	Settings for the read loop.

	`device_name` enables auditioning: when set, each converted note is played on that
	MIDI output for `duration` seconds.
	"""

	prompt: str = "Note name: "
	on_error: str = "raise"
	device_name: typing.Optional[str] = None
	channel: int = 0
	velocity: int = 100
	duration: float = 0.5

	def __post_init__ (self) -> None:

		if self.on_error not in ON_ERROR_MODES:
			raise ValueError(f"on_error must be one of {ON_ERROR_MODES}, got {self.on_error!r}")

		if not 0 <= self.channel <= 15:
			raise ValueError(f"MIDI channel must be between 0 and 15, got {self.channel}")

		if not 0 <= self.velocity <= 127:
			raise ValueError(f"Velocity must be between 0 and 127, got {self.velocity}")

		if self.duration < 0:
			raise ValueError("Duration cannot be negative")


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.

	A missing or empty file gives an empty dict.

	Raises:
		ValueError: If the top level of the file is not a mapping.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def config_from_dict (data: typing.Dict[str, typing.Any]) -> DriverConfig:

	"""
	Build a `DriverConfig` from parsed YAML.

	Reads the ``driver`` section (``prompt``, ``on_error``) and the ``midi`` section
	(``device_name``, ``channel``, ``velocity``, ``duration``). Missing keys keep their
	defaults.
	"""

	driver = data.get('driver', {}) or {}
	midi = data.get('midi', {}) or {}

	for section_name, section in (('driver', driver), ('midi', midi)):
		if not isinstance(section, dict):
			raise ValueError(f"Config section {section_name!r} must be a mapping")

	defaults = DriverConfig()

	return DriverConfig(
		prompt = driver.get('prompt', defaults.prompt),
		on_error = driver.get('on_error', defaults.on_error),
		device_name = midi.get('device_name', defaults.device_name),
		channel = int(midi.get('channel', defaults.channel)),
		velocity = int(midi.get('velocity', defaults.velocity)),
		duration = float(midi.get('duration', defaults.duration)),
	)


def format_result (midi_id: int, freq: float) -> str:

	"""Format a conversion as ``ID: 0x45, Freq: 440 Hz``."""

	return f"ID: 0x{midi_id:x}, Freq: {freq:g} Hz"


def run (
	config: DriverConfig,
	stdin: typing.TextIO,
	stdout: typing.TextIO,
	stderr: typing.TextIO,
	midi_out: typing.Optional[typing.Any] = None
) -> int:

	"""
	Convert note names line by line until end of input.

	The prompt goes to `stderr` so that `stdout` carries only results. Each line is
	processed to completion before the next is read.

	Parameters:
		config: Loop settings.
		stdin: Source of note names, one per line.
		stdout: Destination for formatted results.
		stderr: Destination for the prompt.
		midi_out: Open MIDI output for auditioning, or None.

	Returns:
		The number of lines successfully converted.

	Raises:
		InvalidNoteNameError: On a malformed line when ``config.on_error`` is ``"raise"``.
	"""

	converted = 0

	while True:

		stderr.write(config.prompt)
		stderr.flush()

		line = stdin.readline()

		if not line:
			break

		note_name = line.rstrip("\r\n")

		try:
			midi_id = tuner.notes.note_name_to_midi_id(note_name)

		except tuner.notes.InvalidNoteNameError as e:
			if config.on_error == "raise":
				raise
			logger.warning(f"Skipping line: {e}")
			continue

		freq = tuner.notes.midi_id_to_freq(midi_id)
		stdout.write(format_result(midi_id, freq) + "\n")
		stdout.flush()
		converted += 1

		if midi_out is not None:
			tuner.midi_utils.audition_note(
				midi_out,
				midi_id,
				channel = config.channel,
				velocity = config.velocity,
				duration = config.duration
			)

	return converted
