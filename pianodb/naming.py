"""Chord-symbol names for chord types.

Bridges PCIDs and chord symbols in pychord's simplified notation (e.g.,
"Gm7") and Harte notation (e.g., "G:min7").
"""

from __future__ import annotations

from pianodb.models import ChordSymbol
from pianodb.pitch_class import PITCH_CLASS_NAMES, decode_pitch_classes, encode_pitch_classes, note_to_pc

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "aug7": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "5": "5",
}

# Reverse mapping, preferring the first pychord spelling of each quality
HARTE_TO_PYCHORD_QUALITY: dict[str, str] = {}
for _pychord, _harte in PYCHORD_TO_HARTE_QUALITY.items():
    HARTE_TO_PYCHORD_QUALITY.setdefault(_harte, _pychord)
del _pychord, _harte


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def harte_quality_to_pychord(harte_quality: str) -> str:
    """Convert a Harte shorthand to pychord quality string.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> harte_quality_to_pychord("hdim7")
    'm7-5'
    """
    if harte_quality in HARTE_TO_PYCHORD_QUALITY:
        return HARTE_TO_PYCHORD_QUALITY[harte_quality]
    msg = f"Unknown Harte quality: {harte_quality}"
    raise ValueError(msg)


def _relative_pcid(root: str, notes: list[str]) -> int:
    root_pc = note_to_pc(root)
    return encode_pitch_classes((note_to_pc(note) - root_pc) % 12 for note in notes)


def chord_symbols(pcid: int) -> list[ChordSymbol]:
    """Name a chord type, voiced on a C root.

    Uses pychord to find every chord whose notes are exactly the pitch
    classes of ``pcid``, including slash chords over C. Names whose quality
    has no Harte equivalent are dropped.

    Parameters
    ----------
    pcid : int
        The chord type.

    Returns
    -------
    list[ChordSymbol]
        Matching chord symbols, in pychord's order.

    Examples
    --------
    >>> str(chord_symbols(72)[0])
    'C:maj'
    """
    from pychord import find_chords_from_notes

    notes = [PITCH_CLASS_NAMES[pc] for pc in decode_pitch_classes(pcid)]
    if len(notes) < 2:
        return []

    symbols: list[ChordSymbol] = []
    for found in find_chords_from_notes(notes):
        quality = PYCHORD_TO_HARTE_QUALITY.get(str(found.quality))
        if quality is None:
            continue
        symbols.append(ChordSymbol(root=found.root, quality=quality, bass=found.on or None))
    return symbols


def pcid_from_chord(label: str) -> int:
    """Chord type of a pychord symbol, relative to the chord root.

    The bass of a slash chord is ignored: "C/E" is the same chord type as "C".

    Raises
    ------
    ValueError
        If pychord cannot parse the label.

    Examples
    --------
    >>> pcid_from_chord("Gm7")
    580
    """
    from pychord import Chord as PyChord

    chord = PyChord(label)
    components = PyChord(f"{chord.root}{chord.quality}").components()
    return _relative_pcid(chord.root, components)


def pcid_from_harte(label: str) -> int:
    """Chord type of a Harte label, relative to the chord root.

    Examples
    --------
    >>> pcid_from_harte("G:min7")
    580
    """
    from harte.harte import Harte

    chord = Harte(label.split("/")[0])
    root_pc = note_to_pc(chord.get_root())
    return encode_pitch_classes((pc - root_pc) % 12 for pc in chord.pitchClasses)
