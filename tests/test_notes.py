import math

import pytest

import tuner.notes
import tuner.strtonum


def test_reference_pitch ():

	"""A4 is MIDI 69 and 440 Hz."""

	assert tuner.notes.note_name_to_midi_id("A4") == 69
	assert tuner.notes.midi_id_to_freq(69) == 440.0
	assert tuner.notes.note_name_to_freq("A4") == pytest.approx(440.0)


def test_octaves_double_and_halve ():

	"""Twelve semitones up doubles the frequency, twelve down halves it."""

	assert tuner.notes.midi_id_to_freq(81) == pytest.approx(880.0)
	assert tuner.notes.midi_id_to_freq(57) == pytest.approx(220.0)


def test_middle_c ():

	"""C4 is MIDI 60."""

	assert tuner.notes.note_name_to_midi_id("C4") == 60
	assert tuner.notes.note_name_to_freq("C4") == pytest.approx(tuner.notes.midi_id_to_freq(60))
	assert tuner.notes.note_name_to_freq("C4") == pytest.approx(261.6256, abs=1e-4)


def test_all_letters_sharps_and_octaves ():

	"""Every letter/sharp/octave combination either matches the formula or is rejected above 127."""

	for letter, offset in tuner.notes.PITCH_CLASS_OFFSETS.items():
		for sharp in ("", "#"):
			for octave in range(-1, 10):

				name = f"{letter}{sharp}{octave}"
				expected = offset + (1 if sharp else 0) + (octave + 1) * 12

				if expected <= 127:
					assert tuner.notes.note_name_to_midi_id(name) == expected
				else:
					with pytest.raises(tuner.notes.InvalidNoteNameError):
						tuner.notes.note_name_to_midi_id(name)


def test_top_of_range ():

	"""G9 is the highest note; G#9 would be 128."""

	assert tuner.notes.note_name_to_midi_id("G9") == 127

	with pytest.raises(tuner.notes.InvalidNoteNameError):
		tuner.notes.note_name_to_midi_id("G#9")

	with pytest.raises(tuner.notes.InvalidNoteNameError):
		tuner.notes.note_name_to_midi_id("A9")


def test_bottom_of_range ():

	"""C-1 is MIDI 0."""

	assert tuner.notes.note_name_to_midi_id("C-1") == 0
	assert tuner.notes.note_name_to_midi_id("B#-1") == 12


def test_case_insensitive ():

	"""Lowercase letters parse the same as uppercase."""

	assert tuner.notes.note_name_to_midi_id("a4") == tuner.notes.note_name_to_midi_id("A4")
	assert tuner.notes.note_name_to_midi_id("f#2") == tuner.notes.note_name_to_midi_id("F#2")


def test_signed_octave ():

	"""The octave may carry an explicit plus sign."""

	assert tuner.notes.note_name_to_midi_id("A+4") == 69


def test_rejections ():

	"""Malformed names all raise InvalidNoteNameError."""

	bad_names = [
		"",         # empty
		"A",        # too short
		"C",        # missing octave
		"C#",       # missing octave after sharp
		"H4",       # invalid letter
		"44",       # no letter
		"C-2",      # octave below -1
		"C10",      # octave above 9
		"Cb4",      # flats are not supported
		"C##4",     # double sharp
		"C 4",      # whitespace
		" C4",      # leading whitespace
		"C4 ",      # trailing whitespace
		"C4x",      # trailing garbage
		"C#-",      # sign with no digits
		"Ä4",       # non-ASCII letter
		"c\u00004", # embedded NUL
	]

	for name in bad_names:
		with pytest.raises(tuner.notes.InvalidNoteNameError):
			tuner.notes.note_name_to_midi_id(name)


def test_octave_parse_failure_is_remapped ():

	"""A bad octave surfaces as InvalidNoteNameError, never NumberFormatError."""

	result = tuner.notes.try_note_name_to_midi_id("C#abc")

	assert not result.ok
	assert type(result.error) is tuner.notes.InvalidNoteNameError
	assert not isinstance(result.error, tuner.strtonum.NumberFormatError)


def test_error_carries_note_name ():

	"""The error names the rejected input."""

	with pytest.raises(tuner.notes.InvalidNoteNameError, match="Invalid note name") as info:
		tuner.notes.note_name_to_freq("X9")

	assert info.value.note_name == "X9"


def test_try_note_name_success ():

	"""The result form carries the MIDI id on success."""

	result = tuner.notes.try_note_name_to_midi_id("A#4")

	assert result.ok
	assert result.value == 70


def test_midi_id_to_freq_range ():

	"""Integer MIDI ids outside 0-127 are rejected."""

	assert tuner.notes.midi_id_to_freq(0) == pytest.approx(8.1758, abs=1e-4)
	assert tuner.notes.midi_id_to_freq(127) == pytest.approx(12543.85, abs=1e-2)

	with pytest.raises(ValueError):
		tuner.notes.midi_id_to_freq(128)

	with pytest.raises(ValueError):
		tuner.notes.midi_id_to_freq(-1)


def test_midi_id_to_freq_requires_integer ():

	"""Fractional ids and booleans are not integer MIDI ids."""

	with pytest.raises(ValueError, match="integer"):
		tuner.notes.midi_id_to_freq(69.5)

	with pytest.raises(ValueError, match="integer"):
		tuner.notes.midi_id_to_freq(True)


def test_fractional_midi_id_to_freq ():

	"""Fractional ids fall between semitones and the range is unbounded."""

	assert tuner.notes.fractional_midi_id_to_freq(69.0) == pytest.approx(440.0)
	assert tuner.notes.fractional_midi_id_to_freq(69.5) == pytest.approx(440.0 * 2 ** (0.5 / 12))
	assert tuner.notes.fractional_midi_id_to_freq(-51.0) == pytest.approx(440.0 / 2 ** 10)
	assert tuner.notes.fractional_midi_id_to_freq(200.5) > tuner.notes.midi_id_to_freq(127)

	# Extreme ids saturate instead of raising.
	assert tuner.notes.fractional_midi_id_to_freq(20000.0) == math.inf
	assert tuner.notes.fractional_midi_id_to_freq(-20000.0) == 0.0


def test_midi_id_to_note_name_round_trip ():

	"""Every MIDI id has a note name that parses back to it."""

	for midi_id in range(128):
		name = tuner.notes.midi_id_to_note_name(midi_id)
		assert tuner.notes.note_name_to_midi_id(name) == midi_id

	assert tuner.notes.midi_id_to_note_name(61) == "C#4"
	assert tuner.notes.midi_id_to_note_name(0) == "C-1"

	with pytest.raises(ValueError):
		tuner.notes.midi_id_to_note_name(128)


def test_freq_to_midi_id ():

	"""Frequency to MIDI is the inverse of MIDI to frequency."""

	assert tuner.notes.freq_to_midi_id(440.0) == pytest.approx(69.0)
	assert tuner.notes.freq_to_midi_id(880.0) == pytest.approx(81.0)

	for midi_id in (0, 21, 60, 108, 127):
		assert tuner.notes.freq_to_midi_id(tuner.notes.midi_id_to_freq(midi_id)) == pytest.approx(midi_id)

	with pytest.raises(ValueError):
		tuner.notes.freq_to_midi_id(0.0)


def test_package_exports ():

	"""The package re-exports the conversion functions."""

	import tuner

	assert tuner.note_name_to_midi_id("A4") == 69
	assert tuner.InvalidNoteNameError is tuner.notes.InvalidNoteNameError
