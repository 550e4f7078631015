"""Encoding and analysis core for a piano chord-voicing database.

Chord types are pitch-class sets packed into an 11-bit PCID; voicings are
ascending note stacks packed into a short digest string.

Examples
--------
>>> from pianodb import encode_pitch_classes, decode_pitch_classes
>>> encode_pitch_classes({0, 4, 7})
72
>>> decode_pitch_classes(72)
[0, 4, 7]

>>> from pianodb import encode_notes, decode_notes
>>> encode_notes([0, 4, 7])
'43'
>>> decode_notes("43")
[0, 4, 7]

>>> from pianodb import calculate_inversions
>>> [inv.pcid for inv in calculate_inversions(72)]
[72, 132, 272]
"""

from pianodb.analysis import (
    DEFAULT_OCTAVE_SHIFT,
    analyze_voicing,
    calculate_inversions,
    digest_pitch_classes,
    interval_vector,
    note_name,
    notes_from_digest,
    span,
    voicing_pcid,
)
from pianodb.digest import DIGEST_ALPHABET, MAX_GAP, decode_notes, encode_notes
from pianodb.errors import (
    DatasetUnavailable,
    GapTooLarge,
    InvalidDigestCharacter,
    InvalidPitchClass,
    MalformedRecord,
    MetadataUnavailable,
    NotesNotAscending,
    PcidOutOfRange,
    PianoDBError,
)
from pianodb.models import (
    ChordSymbol,
    Inversion,
    NoteInfo,
    PitchClassRecord,
    VoicingAnalysis,
    VoicingRecord,
)
from pianodb.pitch_class import (
    MAX_PCID,
    PITCH_CLASS_NAMES,
    decode_pitch_classes,
    encode_pitch_classes,
    pcid_from_notes,
    pitch_class_name,
    present_pitches,
)
from pianodb.records import parse_pitch_class_csv, parse_voicing_csv
from pianodb.search import SearchResult, find_matches, search_notes
from pianodb.thesaurus import Thesaurus, ThesaurusEntry, describe, load_thesaurus, parse_thesaurus

__all__ = [
    "DEFAULT_OCTAVE_SHIFT",
    "DIGEST_ALPHABET",
    "MAX_GAP",
    "MAX_PCID",
    "PITCH_CLASS_NAMES",
    "ChordSymbol",
    "DatasetUnavailable",
    "GapTooLarge",
    "InvalidDigestCharacter",
    "InvalidPitchClass",
    "Inversion",
    "MalformedRecord",
    "MetadataUnavailable",
    "NoteInfo",
    "NotesNotAscending",
    "PcidOutOfRange",
    "PianoDBError",
    "PitchClassRecord",
    "SearchResult",
    "Thesaurus",
    "ThesaurusEntry",
    "VoicingAnalysis",
    "VoicingRecord",
    "analyze_voicing",
    "calculate_inversions",
    "decode_notes",
    "decode_pitch_classes",
    "describe",
    "digest_pitch_classes",
    "encode_notes",
    "encode_pitch_classes",
    "find_matches",
    "interval_vector",
    "load_thesaurus",
    "note_name",
    "notes_from_digest",
    "parse_pitch_class_csv",
    "parse_thesaurus",
    "parse_voicing_csv",
    "pcid_from_notes",
    "pitch_class_name",
    "present_pitches",
    "search_notes",
    "span",
    "voicing_pcid",
]
