"""Command-line interface: describe chord types, voicings and note selections as JSON.

Usage:
    pianodb pcid 72 --thesaurus pcid_thesaurus.tsv
    pianodb digest 43 --octave-shift 36
    pianodb encode 48 52 55
    pianodb search 60 64 67 --csv most_popular_cls_packed.csv
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pianodb.analysis import DEFAULT_OCTAVE_SHIFT, analyze_voicing, notes_from_digest, voicing_pcid
from pianodb.digest import encode_notes
from pianodb.errors import PianoDBError
from pianodb.naming import chord_symbols
from pianodb.pitch_class import pcid_from_notes, present_pitches
from pianodb.records import frequency_shares, parse_pitch_class_csv
from pianodb.search import search_notes
from pianodb.thesaurus import describe, load_thesaurus


def describe_pcid(pcid: int, thesaurus_path: Path | None = None) -> dict[str, Any]:
    """Build the JSON view of a chord type."""
    thesaurus = load_thesaurus(thesaurus_path) if thesaurus_path else None
    description = describe(pcid, thesaurus)
    result: dict[str, Any] = description.display()
    result["pcid"] = pcid
    result["inversions"] = [asdict(inversion) for inversion in description.inversions]
    result["chord_symbols"] = [str(symbol) for symbol in chord_symbols(pcid)]
    return result


def describe_digest(digest: str, octave_shift: int = DEFAULT_OCTAVE_SHIFT) -> dict[str, Any]:
    """Build the JSON view of a voicing."""
    info = notes_from_digest(digest, octave_shift)
    analysis = analyze_voicing(digest, octave_shift)
    return {
        "digest": digest,
        "pcid": voicing_pcid(digest),
        "notes": list(info.notes),
        "note_names": list(info.note_names),
        "pitch_classes": list(info.pitch_classes),
        "span": info.span,
        "intervals": list(analysis.intervals),
        "interval_names": list(analysis.interval_names),
    }


def describe_notes(notes: list[int]) -> dict[str, Any]:
    """Build the JSON view of a note selection."""
    ordered = sorted(set(notes))
    return {
        "notes": ordered,
        "digest": encode_notes(ordered),
        "pcid": pcid_from_notes(ordered),
    }


def search_dataset(notes: list[int], csv_path: Path, limit: int) -> dict[str, Any]:
    """Search a chord-type CSV file for a note selection."""
    records = parse_pitch_class_csv(csv_path.read_text(encoding="utf-8"))
    shares = dict(zip((record.pcid for record in records), frequency_shares(records)))
    result = search_notes(notes, records, limit=limit)
    return {
        "pcid": result.pcid,
        "matches": [
            {
                "match": result.match_kind(record),
                "pcid": record.pcid,
                "rank": record.rank,
                "frequency": record.frequency,
                "frequency_share": round(shares[record.pcid], 4),
                "duration": record.duration,
                "pitches": present_pitches(record.pcid),
            }
            for record in result.matches
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pianodb",
        description="Inspect piano chord types (PCIDs) and voicings (digests)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s pcid 72
  %(prog)s digest 43 --pretty
  %(prog)s search 60 64 67 --csv chords.csv --limit 5
        """,
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    pcid_parser = subparsers.add_parser("pcid", help="Describe a chord type")
    pcid_parser.add_argument("pcid", type=int, help="PCID (0-2047)")
    pcid_parser.add_argument("--thesaurus", type=Path, default=None, help="PCID thesaurus TSV file")

    digest_parser = subparsers.add_parser("digest", help="Describe a voicing digest")
    digest_parser.add_argument("digest", help="Voicing digest")
    digest_parser.add_argument(
        "--octave-shift",
        type=int,
        default=DEFAULT_OCTAVE_SHIFT,
        help=f"MIDI note of the bass (default: {DEFAULT_OCTAVE_SHIFT}, i.e. C3)",
    )

    encode_parser = subparsers.add_parser("encode", help="Encode notes as a digest and PCID")
    encode_parser.add_argument("notes", type=int, nargs="+", help="Note numbers")

    search_parser = subparsers.add_parser("search", help="Find chord types containing notes")
    search_parser.add_argument("notes", type=int, nargs="+", help="Selected note numbers")
    search_parser.add_argument("--csv", type=Path, required=True, help="Chord-type CSV file")
    search_parser.add_argument("--limit", type=int, default=10, help="Maximum superset matches")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "pcid":
            data = describe_pcid(args.pcid, args.thesaurus)
        elif args.command == "digest":
            data = describe_digest(args.digest, args.octave_shift)
        elif args.command == "encode":
            data = describe_notes(args.notes)
        else:
            data = search_dataset(args.notes, args.csv, args.limit)
    except (PianoDBError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    indent = 2 if args.pretty else None
    print(json.dumps(data, indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
