import pytest

from pianodb import (
    DEFAULT_OCTAVE_SHIFT,
    InvalidDigestCharacter,
    PcidOutOfRange,
    analyze_voicing,
    calculate_inversions,
    decode_pitch_classes,
    digest_pitch_classes,
    encode_pitch_classes,
    interval_vector,
    note_name,
    notes_from_digest,
    span,
    voicing_pcid,
)
from pianodb.analysis import format_interval_vector, format_pitch_classes, interval_name, to_absolute


class TestNoteNaming:
    def test_middle_c(self):
        assert note_name(60) == "C4"

    def test_flat_names(self):
        assert note_name(61) == "Db4"
        assert note_name(70) == "Bb4"

    def test_low_octave(self):
        assert note_name(12) == "C0"
        assert note_name(0) == "C-1"

    def test_to_absolute_default_shift(self):
        assert DEFAULT_OCTAVE_SHIFT == 48
        assert to_absolute([0, 4, 7]) == [48, 52, 55]

    def test_to_absolute_explicit_shift(self):
        assert to_absolute([0, 4, 7], octave_shift=36) == [36, 40, 43]


class TestNotesFromDigest:
    def test_triad(self):
        info = notes_from_digest("43")
        assert info.notes == (0, 4, 7)
        assert info.note_names == ("C3", "E3", "G3")
        assert info.pitch_classes == (0, 4, 7)
        assert info.lowest == 0
        assert info.highest == 7
        assert info.span == 7

    def test_octave_shift_changes_names_only(self):
        info = notes_from_digest("43", octave_shift=60)
        assert info.note_names == ("C4", "E4", "G4")
        assert info.notes == (0, 4, 7)

    def test_open_voicing_projection(self):
        # C G E C: 0 7 16 24
        info = notes_from_digest("798")
        assert info.notes == (0, 7, 16, 24)
        assert info.pitch_classes == (0, 4, 7)
        assert info.span == 24

    def test_invalid_digest(self):
        with pytest.raises(InvalidDigestCharacter):
            notes_from_digest("4 3")


class TestProjectionAndSpan:
    def test_digest_pitch_classes_dedup(self):
        assert digest_pitch_classes([0, 12, 24, 28]) == [0, 4]

    def test_span(self):
        assert span([0, 4, 19]) == 19
        assert span([]) == 0

    def test_voicing_pcid(self):
        assert voicing_pcid("43") == 72
        assert voicing_pcid("798") == 72


class TestAnalyzeVoicing:
    def test_triad(self):
        analysis = analyze_voicing("43")
        assert analysis.note_count == 3
        assert analysis.intervals == (4, 3)
        assert analysis.interval_names == ("maj3", "min3")
        assert analysis.pitch_classes == ("C", "E", "G")
        assert analysis.span == "7 semitones"

    def test_wide_interval_name(self):
        assert interval_name(12) == "octave"
        assert interval_name(6) == "tritone"
        assert interval_name(14) == "14st"


class TestInversions:
    def test_major_triad(self):
        inversions = calculate_inversions(72)
        assert [inv.pcid for inv in inversions] == [72, 132, 272]
        assert [inv.index for inv in inversions] == [0, 1, 2]
        assert [inv.root_name for inv in inversions] == ["C", "E", "G"]

    def test_root_only(self):
        inversions = calculate_inversions(0)
        assert len(inversions) == 1
        assert inversions[0].pcid == 0

    def test_symmetric_set(self):
        # Diminished seventh: every inversion is the same chord type
        dim7 = encode_pitch_classes([0, 3, 6, 9])
        assert {inv.pcid for inv in calculate_inversions(dim7)} == {dim7}

    def test_out_of_range(self):
        with pytest.raises(PcidOutOfRange):
            calculate_inversions(2048)

    def test_closure_and_count_for_all_pcids(self):
        for pcid in range(2048):
            inversions = calculate_inversions(pcid)
            assert len(inversions) == len(decode_pitch_classes(pcid))
            assert inversions[0].pcid == pcid
            assert any(inv.pcid == pcid for inv in inversions)


class TestIntervalVector:
    def test_major_triad(self):
        assert interval_vector(72) == (0, 0, 1, 1, 1, 0)

    def test_root_only(self):
        assert interval_vector(0) == (0, 0, 0, 0, 0, 0)

    def test_chromatic_aggregate(self):
        assert interval_vector(2047) == (12, 12, 12, 12, 12, 6)

    def test_from_pitch_classes(self):
        assert interval_vector([0, 4, 8]) == (0, 0, 0, 3, 0, 0)
        assert interval_vector({2, 6, 9}) == interval_vector(72)

    def test_pair_count(self):
        for pcid in (72, 580, 1365, 2047):
            n = len(decode_pitch_classes(pcid))
            assert sum(interval_vector(pcid)) == n * (n - 1) // 2

    def test_invariant_under_inversion(self):
        for pcid in range(0, 2048, 7):
            vector = interval_vector(pcid)
            for inversion in calculate_inversions(pcid):
                assert interval_vector(decode_pitch_classes(inversion.pcid)) == vector

    def test_formatting(self):
        assert format_interval_vector(interval_vector(72)) == "<0,0,1,1,1,0>"
        assert format_pitch_classes([0, 4, 7]) == "[0 4 7]"
