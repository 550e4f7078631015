"""Pitch class codec.

A pitch-class set is packed into an 11-bit integer, the PCID. Pitch class 0
(the root) is always implicitly present and never encoded; bit ``i - 1`` is
set iff pitch class ``i`` (1-11) is a member. This gives 2048 chord types,
each containing the root.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Integral

from pianodb.errors import InvalidPitchClass, PcidOutOfRange

MAX_PCID = 2047

PITCH_CLASS_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}


@dataclass(frozen=True)
class PitchClassPresence:
    """One row of the 12-slot pitch-class table of a PCID.

    Parameters
    ----------
    name : str
        Canonical (flat) pitch-class name.
    semitone : int
        Pitch class 0-11.
    present : bool
        Whether the pitch class belongs to the set.
    """

    name: str
    semitone: int
    present: bool


def _check_pitch_class(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or not 0 <= value <= 11:
        raise InvalidPitchClass(value)
    return int(value)


def _check_pcid(pcid: object) -> int:
    if isinstance(pcid, bool) or not isinstance(pcid, Integral) or not 0 <= pcid <= MAX_PCID:
        raise PcidOutOfRange(pcid)
    return int(pcid)


def encode_pitch_classes(pitch_classes: Iterable[int]) -> int:
    """Pack a collection of pitch classes into a PCID.

    Pitch class 0 is accepted but contributes nothing, since the root is
    always assumed. Duplicates are irrelevant.

    Parameters
    ----------
    pitch_classes : Iterable[int]
        Pitch classes, each in 0-11.

    Returns
    -------
    int
        The PCID (0-2047).

    Raises
    ------
    InvalidPitchClass
        If any value is outside 0-11.

    Examples
    --------
    >>> encode_pitch_classes({0, 4, 7})
    72
    >>> encode_pitch_classes([])
    0
    """
    packed = 0
    for value in pitch_classes:
        pc = _check_pitch_class(value)
        if pc == 0:
            continue
        packed |= 1 << (pc - 1)
    return packed


def decode_pitch_classes(pcid: int) -> list[int]:
    """Unpack a PCID into its ascending list of pitch classes.

    Parameters
    ----------
    pcid : int
        The PCID (0-2047).

    Returns
    -------
    list[int]
        Ascending pitch classes, always starting with the root 0.

    Raises
    ------
    PcidOutOfRange
        If ``pcid`` is outside 0-2047.

    Examples
    --------
    >>> decode_pitch_classes(72)
    [0, 4, 7]
    >>> decode_pitch_classes(0)
    [0]
    """
    _check_pcid(pcid)
    pitch_classes = [0]
    for pc in range(1, 12):
        if pcid & (1 << (pc - 1)):
            pitch_classes.append(pc)
    return pitch_classes


def pitch_class_name(pc: int) -> str:
    """Return the canonical name of a pitch class.

    Examples
    --------
    >>> pitch_class_name(6)
    'Gb'
    """
    return PITCH_CLASS_NAMES[_check_pitch_class(pc)]


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def spell_pitch_classes(pitch_classes: Iterable[int]) -> list[str]:
    """Name pitch classes for display.

    Uses the flat table, except that Gb is respelled F# when G or A is
    also present. This is a display heuristic only and must never feed back
    into a PCID.

    Examples
    --------
    >>> spell_pitch_classes([0, 2, 6, 9])
    ['C', 'D', 'F#', 'A']
    >>> spell_pitch_classes([0, 3, 6])
    ['C', 'Eb', 'Gb']
    """
    names = [pitch_class_name(pc) for pc in pitch_classes]
    if "Gb" in names and ("G" in names or "A" in names):
        names[names.index("Gb")] = "F#"
    return names


def present_pitches(pcid: int, pretty: bool = True) -> list[str]:
    """Return the names of the pitch classes in a PCID, root first.

    Examples
    --------
    >>> present_pitches(72)
    ['C', 'E', 'G']
    """
    pitch_classes = decode_pitch_classes(pcid)
    if pretty:
        return spell_pitch_classes(pitch_classes)
    return [PITCH_CLASS_NAMES[pc] for pc in pitch_classes]


def pitch_class_table(pcid: int) -> list[PitchClassPresence]:
    """Return all 12 pitch classes with their membership in ``pcid``."""
    members = set(decode_pitch_classes(pcid))
    return [
        PitchClassPresence(name=name, semitone=pc, present=pc in members)
        for pc, name in enumerate(PITCH_CLASS_NAMES)
    ]


def pcid_to_binary(pcid: int) -> str:
    """Show the 11-bit pattern of a PCID (bit 0, i.e. Db, is rightmost).

    Examples
    --------
    >>> pcid_to_binary(72)
    '00001001000'
    """
    return format(_check_pcid(pcid), "011b")


def transpose_pitch_classes(pitch_classes: Iterable[int], semitones: int) -> list[int]:
    """Shift pitch classes by ``semitones`` modulo 12, returned ascending and unique.

    Examples
    --------
    >>> transpose_pitch_classes([0, 4, 7], -4)
    [0, 3, 8]
    """
    return sorted({(_check_pitch_class(pc) + semitones) % 12 for pc in pitch_classes})


def pcid_from_notes(notes: Iterable[int]) -> int:
    """Compute the chord type of arbitrary absolute notes.

    The lowest note is taken as the root: every note is made relative to it
    and reduced modulo 12 before encoding.

    Parameters
    ----------
    notes : Iterable[int]
        Absolute note numbers in any order (e.g., MIDI numbers from piano keys).

    Returns
    -------
    int
        The PCID, or 0 for an empty selection.

    Examples
    --------
    >>> pcid_from_notes([64, 60, 67])
    72
    >>> pcid_from_notes([52, 60, 67])  # E in the bass: C/E is E-rooted
    132
    """
    notes = list(notes)
    if not notes:
        return 0
    bass = min(notes)
    return encode_pitch_classes((note - bass) % 12 for note in notes)
