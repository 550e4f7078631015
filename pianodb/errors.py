"""Exception types raised by pianodb.

Codec errors subclass ``ValueError`` so callers can keep catching the
built-in type; a thesaurus miss is a ``LookupError`` because it is a valid
"no entry" outcome rather than an invalid identifier.
"""

from __future__ import annotations


class PianoDBError(ValueError):
    """Base class for invalid identifiers and unparseable input."""


class InvalidPitchClass(PianoDBError):
    """A pitch class outside 0-11."""

    def __init__(self, value: object) -> None:
        self.value = value
        msg = f"Pitch class must be in range 0-11, got {value!r}"
        super().__init__(msg)


class PcidOutOfRange(PianoDBError):
    """A PCID outside 0-2047."""

    def __init__(self, pcid: object) -> None:
        self.pcid = pcid
        msg = f"PCID must be in range 0-2047, got {pcid!r}"
        super().__init__(msg)


class NotesNotAscending(PianoDBError):
    """A note that is not strictly greater than its predecessor."""

    def __init__(self, index: int, previous: int, note: int) -> None:
        self.index = index
        self.previous = previous
        self.note = note
        msg = f"Notes must be in ascending order: note {note} at position {index} follows {previous}"
        super().__init__(msg)


class GapTooLarge(PianoDBError):
    """A gap between consecutive notes that the digest alphabet cannot encode."""

    def __init__(self, gap: int, max_gap: int) -> None:
        self.gap = gap
        self.max_gap = max_gap
        msg = f"Gap of {gap} semitones exceeds the maximum encodable gap of {max_gap}"
        super().__init__(msg)


class InvalidDigestCharacter(PianoDBError):
    """A digest character that is not part of the digest alphabet."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        msg = f"Invalid character in digest at position {position}: {char!r}"
        super().__init__(msg)


class MalformedRecord(PianoDBError):
    """A dataset row with the wrong shape or an unparseable field."""

    def __init__(self, reason: str, line: str = "", line_number: int | None = None) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        msg = f"Malformed record ({where}{reason}): {line!r}"
        super().__init__(msg)


class DatasetUnavailable(PianoDBError):
    """A dataset CSV that could not be retrieved."""


class MetadataUnavailable(LookupError):
    """No thesaurus entry exists for a PCID."""

    def __init__(self, pcid: int) -> None:
        self.pcid = pcid
        msg = f"No thesaurus entry for PCID {pcid}"
        super().__init__(msg)
