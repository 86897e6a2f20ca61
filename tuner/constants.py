"""Fixed tuning constants.

Twelve-tone equal temperament referenced to A4 = 440 Hz, with MIDI note 69 as A4.
These values are not configurable.
"""

# Reference pitch (A4).
A4_MIDI_ID = 69
A4_FREQUENCY = 440.0

# 2^(1/12), the ratio between adjacent semitones.
SEMITONE_RATIO = 1.05946309435929526456

SEMITONES_PER_OCTAVE = 12

MIDI_ID_MIN = 0
MIDI_ID_MAX = 127

# Scientific pitch notation octaves covered by the MIDI range (C-1 = 0, G9 = 127).
OCTAVE_MIN = -1
OCTAVE_MAX = 9

SHARP = "#"
