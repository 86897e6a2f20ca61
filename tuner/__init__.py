"""
Tuner - conversion among note names, MIDI note ids and frequencies.

Three representations of a pitch, all in twelve-tone equal temperament with
A4 = 440 Hz:

- **Note names** such as ``"A4"``, ``"c#3"`` or ``"G-1"``: a letter A-G in
  either case, an optional sharp, and an octave from -1 to 9.
- **MIDI note ids** from 0 to 127, with 69 as A4.
- **Frequencies** in hertz.

Parsing is strict. Trailing characters, whitespace, flats and notes outside
the MIDI range are rejected with ``InvalidNoteNameError`` rather than being
guessed at or clamped.

Example:
	```python
	import tuner

	tuner.note_name_to_midi_id("A4")   # → 69
	tuner.midi_id_to_freq(60)          # → 261.63 (approximately)
	tuner.note_name_to_freq("A#4")     # → 466.16 (approximately)
	```

Run ``python -m tuner`` for an interactive prompt that reads note names from
standard input. An optional ``config.yaml`` in the working directory sets the
prompt, what to do with malformed lines, and a MIDI output to play each note on.

Package-level exports: ``note_name_to_midi_id``, ``midi_id_to_freq``,
``fractional_midi_id_to_freq``, ``note_name_to_freq``, ``midi_id_to_note_name``,
``freq_to_midi_id``, ``InvalidNoteNameError``, ``NumberFormatError``.
"""

import tuner.notes
import tuner.strtonum


note_name_to_midi_id = tuner.notes.note_name_to_midi_id
midi_id_to_freq = tuner.notes.midi_id_to_freq
fractional_midi_id_to_freq = tuner.notes.fractional_midi_id_to_freq
note_name_to_freq = tuner.notes.note_name_to_freq
midi_id_to_note_name = tuner.notes.midi_id_to_note_name
freq_to_midi_id = tuner.notes.freq_to_midi_id
InvalidNoteNameError = tuner.notes.InvalidNoteNameError
NumberFormatError = tuner.strtonum.NumberFormatError
