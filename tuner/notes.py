"""Conversion among note names, MIDI note ids and frequencies.

Note names follow scientific pitch notation with sharps only: a letter ``A``-``G``
(either case), an optional ``#``, then an octave from -1 to 9. ``"C-1"`` is MIDI note 0,
``"A4"`` is 69 and ``"G9"`` is 127. Frequencies use twelve-tone equal temperament with
A4 = 440 Hz.

Module-level helpers:
- `note_name_to_midi_id(note_name)`: Parse a note name. Raises `InvalidNoteNameError`.
- `try_note_name_to_midi_id(note_name)`: Same parse, returning a `ParseResult`.
- `midi_id_to_freq(midi_id)`: Frequency of an integer MIDI note (0-127).
- `fractional_midi_id_to_freq(midi_id)`: Frequency of any real-valued MIDI pitch.
- `note_name_to_freq(note_name)`: Note name straight to frequency.
- `midi_id_to_note_name(midi_id)` and `freq_to_midi_id(freq)`: The inverse directions.

Example:
	```python
	note_name_to_midi_id("A4")      # → 69
	note_name_to_midi_id("c#4")     # → 61
	midi_id_to_freq(81)             # → 880.0 (approximately)
	note_name_to_freq("A4")         # → 440.0
	```
"""

import logging
import math
import types
import typing

import tuner.constants
import tuner.strtonum


logger = logging.getLogger(__name__)


PITCH_CLASS_OFFSETS: typing.Mapping[str, int] = types.MappingProxyType({
	"A": 9,
	"B": 11,
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
})

PC_TO_NOTE_NAME: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)

_LETTERS = frozenset("ABCDEFGabcdefg")


class InvalidNoteNameError (ValueError):

	"""Raised when a string is not a note name in the MIDI range."""

	def __init__ (self, note_name: str) -> None:

		super().__init__(f"Invalid note name: {note_name!r}")
		self.note_name = note_name


def _reject (note_name: str, reason: str) -> tuner.strtonum.ParseResult[int]:

	logger.debug(f"Rejected note name {note_name!r}: {reason}")

	return tuner.strtonum.ParseResult(error=InvalidNoteNameError(note_name))


def try_note_name_to_midi_id (note_name: str) -> tuner.strtonum.ParseResult[int]:

	"""
	Parse a note name into a MIDI note id without raising.

	The grammar is strict: no whitespace, no flats, a single optional ``#``, and a
	mandatory octave in the range -1 to 9. A combination that lands outside 0-127
	(e.g. ``"G#9"``) is rejected rather than clamped.

	Returns:
		A `ParseResult` holding the MIDI id, or an `InvalidNoteNameError`. Failures of the
		octave number parse are reported as `InvalidNoteNameError` too, never as
		`NumberFormatError`.
	"""

	if len(note_name) < 2:
		return _reject(note_name, "too short")

	letter = note_name[0]

	if letter not in _LETTERS:
		return _reject(note_name, f"unknown letter {letter!r}")

	midi_id = PITCH_CLASS_OFFSETS[letter.upper()]
	remainder = note_name[1:]

	if remainder.startswith(tuner.constants.SHARP):
		midi_id += 1
		remainder = remainder[1:]

	octave_result = tuner.strtonum.try_parse_int(remainder, 10)

	if not octave_result.ok:
		return _reject(note_name, f"octave {remainder!r} is not a number")

	octave = typing.cast(int, octave_result.value)

	if not tuner.constants.OCTAVE_MIN <= octave <= tuner.constants.OCTAVE_MAX:
		return _reject(note_name, f"octave {octave} out of range")

	midi_id += (octave + 1) * tuner.constants.SEMITONES_PER_OCTAVE

	if not tuner.constants.MIDI_ID_MIN <= midi_id <= tuner.constants.MIDI_ID_MAX:
		return _reject(note_name, f"MIDI id {midi_id} out of range")

	return tuner.strtonum.ParseResult(value=midi_id)


def note_name_to_midi_id (note_name: str) -> int:

	"""Parse a note name into a MIDI note id.

	Parameters:
		note_name: e.g. ``"A4"``, ``"c#3"``, ``"G-1"``.

	Returns:
		MIDI note id (0-127).

	Raises:
		InvalidNoteNameError: If the name is malformed or outside the MIDI range.

	Example:
		```python
		note_name_to_midi_id("C4")   # → 60
		note_name_to_midi_id("G9")   # → 127
		note_name_to_midi_id("G#9")  # raises InvalidNoteNameError
		```
	"""

	return try_note_name_to_midi_id(note_name).unwrap()


def fractional_midi_id_to_freq (midi_id: float) -> float:

	"""
	Frequency in hertz of a real-valued MIDI pitch.

	Fractional ids give pitches between semitones, and ids outside 0-127 extend the
	scale in both directions.
	"""

	# Float pow raises OverflowError where C pow returns inf.
	try:
		return tuner.constants.A4_FREQUENCY * tuner.constants.SEMITONE_RATIO ** (midi_id - tuner.constants.A4_MIDI_ID)
	except OverflowError:
		return math.inf


def midi_id_to_freq (midi_id: int) -> float:

	"""
	Frequency in hertz of a MIDI note id.

	Raises:
		ValueError: If `midi_id` is not an integer in the range 0-127. Use
			`fractional_midi_id_to_freq()` for pitches between semitones.
	"""

	if isinstance(midi_id, bool) or not isinstance(midi_id, int):
		raise ValueError(f"MIDI id must be an integer, got {midi_id!r}")

	if not tuner.constants.MIDI_ID_MIN <= midi_id <= tuner.constants.MIDI_ID_MAX:
		raise ValueError(f"MIDI id must be between 0 and 127, got {midi_id}")

	return fractional_midi_id_to_freq(midi_id)


def note_name_to_freq (note_name: str) -> float:

	"""
	Frequency in hertz of a note name.

	Raises:
		InvalidNoteNameError: As for `note_name_to_midi_id()`.
	"""

	return midi_id_to_freq(note_name_to_midi_id(note_name))


def midi_id_to_note_name (midi_id: int) -> str:

	"""Canonical (sharp) note name for a MIDI id, e.g. 61 → ``"C#4"``."""

	if not tuner.constants.MIDI_ID_MIN <= midi_id <= tuner.constants.MIDI_ID_MAX:
		raise ValueError(f"MIDI id must be between 0 and 127, got {midi_id}")

	octave, pitch_class = divmod(midi_id, tuner.constants.SEMITONES_PER_OCTAVE)

	return f"{PC_TO_NOTE_NAME[pitch_class]}{octave - 1}"


def freq_to_midi_id (freq: float) -> float:

	"""
	Real-valued MIDI pitch of a frequency; the inverse of `fractional_midi_id_to_freq()`.

	Raises:
		ValueError: If `freq` is not positive.
	"""

	if freq <= 0:
		raise ValueError("Frequency must be positive")

	return tuner.constants.A4_MIDI_ID + tuner.constants.SEMITONES_PER_OCTAVE * math.log2(freq / tuner.constants.A4_FREQUENCY)
