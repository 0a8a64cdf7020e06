import sys

from chord_notation import Chord, ChordType, LineContext, SongContext, get_capos, render_chord

chord = Chord.parse("Esus4/G#")

# Transpose and convert
sys.stdout.write(str(chord.transpose(2)) + "\n")  # "F#sus4/A#"
sys.stdout.write(chord.to_numeral_string("E") + "\n")  # "Isus/III"

# Render a line of chords for a song played with a capo
song = SongContext.from_metadata({"key": "G", "capo": "2"})
line = LineContext()
sys.stdout.write(" ".join(render_chord(text, line, song) for text in ["G", "Em7", "C", "D/F#"]) + "\n")

# Same song in numerals
song = SongContext(key="G", chord_style=ChordType.NUMERAL)
sys.stdout.write(" ".join(render_chord(text, line, song) for text in ["G", "Em7", "C", "D/F#"]) + "\n")

# Capo suggestions
for capo, shape in get_capos("Eb").items():
    sys.stdout.write(f"capo {capo}: play {shape} shapes\n")
