"""Tests for DNA/RNA-specific operations."""

import math
import random

import pytest

from polyseq import DivisionByZeroError, Dna, Rna


GC_SAMPLE = (
    "CCACCCTCGTGGTATGGCTAGGCATTCAGGAACCGGAGAACGCTTCAGACCAGCCCGGACTGGGAACCTGCGGGCAGTAGGTGGAAT"
)


def random_dna(rng, length):
    return Dna.from_string("".join(rng.choice("ACGT") for _ in range(length)))


class TestGCContent:
    def test_sample(self):
        assert Dna.from_string(GC_SAMPLE).gc_content() == pytest.approx(60.91954, abs=1e-5)

    @pytest.mark.parametrize(
        ("symbols", "expected"),
        [("GGCC", 100.0), ("ATAT", 0.0), ("ACGT", 50.0), ("G", 100.0), ("AAC", 100.0 / 3)],
    )
    def test_simple_values(self, symbols, expected):
        assert Dna.from_string(symbols).gc_content() == pytest.approx(expected)

    def test_rna(self):
        assert Rna.from_string("GCUA").gc_content() == pytest.approx(50.0)


class TestComplement:
    def test_reverse_complement(self):
        assert Dna.from_string("AAAACCCGGT").reverse_complement() == Dna.from_string("ACCGGGTTTT")

    def test_rna_reverse_complement(self):
        assert Rna.from_string("AUGC").reverse_complement() == Rna.from_string("GCAU")

    def test_complement_keeps_order(self):
        assert Dna.from_string("AACG").complement() == Dna.from_string("TTGC")

    def test_reverse_complement_is_involution(self):
        rng = random.Random(3)
        for _ in range(25):
            dna = random_dna(rng, rng.randint(1, 50))
            assert dna.reverse_complement().reverse_complement() == dna
            rna = dna.transcribe()
            assert rna.reverse_complement().reverse_complement() == rna

    def test_result_is_new_value(self):
        dna = Dna.from_string("ACGT")
        result = dna.reverse_complement()
        assert result == dna
        assert result is not dna


class TestTranscription:
    def test_transcribe(self):
        dna = Dna.from_string("GATGGAACTTGACTACGTAAATT")
        assert dna.transcribe() == Rna.from_string("GAUGGAACUUGACUACGUAAAUU")

    def test_untranscribe(self):
        assert Rna.from_string("UUAGC").untranscribe() == Dna.from_string("TTAGC")

    def test_inverses(self):
        rng = random.Random(5)
        for _ in range(25):
            dna = random_dna(rng, rng.randint(1, 50))
            assert dna.transcribe().untranscribe() == dna
            rna = Rna.from_string("".join(rng.choice("ACGU") for _ in range(20)))
            assert rna.untranscribe().transcribe() == rna


class TestTransitionTransversionRatio:
    def test_sample(self):
        a = Dna.from_string(
            "GCAACGCACAACGAAAACCCTTAGGGACTGGATTATTTCGTGATCGTTGTAGTTATTGGAAGTACGGGCATCAACCCAGTT"
        )
        b = Dna.from_string(
            "TTATCTGACAAAGAAAGCCGTCAACGGCTGGATAATTTCGCGATCGTGCTGGTTACTGGCGGTACGAGTGTTCCTTTGGGT"
        )
        assert a.transition_transversion_ratio(b) == pytest.approx(1.21428571429, abs=1e-11)

    def test_simple_ratio(self):
        # A->G and C->T are transitions, A->C is a transversion
        a = Dna.from_string("ACAA")
        b = Dna.from_string("GTCA")
        assert a.transition_transversion_ratio(b) == pytest.approx(2.0)

    def test_truncates_to_shorter(self):
        a = Dna.from_string("AC")
        b = Dna.from_string("CCGGGG")
        assert a.transition_transversion_ratio(b) == pytest.approx(0.0)

    def test_zero_transversions_raise_by_default(self):
        a = Dna.from_string("AC")
        b = Dna.from_string("GT")
        with pytest.raises(DivisionByZeroError):
            a.transition_transversion_ratio(b)
        with pytest.raises(ZeroDivisionError):
            a.transition_transversion_ratio(b)

    def test_zero_transversion_policies(self):
        a = Dna.from_string("AC")
        assert math.isnan(a.transition_transversion_ratio(Dna.from_string("GT"), on_zero="nan"))
        assert a.transition_transversion_ratio(Dna.from_string("GT"), on_zero="inf") == math.inf
        assert math.isnan(a.transition_transversion_ratio(a, on_zero="inf"))

    def test_invalid_policy(self):
        a = Dna.from_string("AC")
        with pytest.raises(ValueError, match="Invalid on_zero mode"):
            a.transition_transversion_ratio(a, on_zero="ignore")

    def test_rna(self):
        a = Rna.from_string("AU")
        b = Rna.from_string("GA")
        assert a.transition_transversion_ratio(b) == pytest.approx(1.0)

    def test_mixed_alphabets_fail(self):
        with pytest.raises(TypeError):
            Dna.from_string("AC").transition_transversion_ratio(Rna.from_string("GU"))
