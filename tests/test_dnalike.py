import pytest

from vdjseq.dna import AminoAcid, Dna
from vdjseq.dnalike import DnaLike, SequenceType


def test_amino_acids_extract_and_translate():
    amino_acid = AminoAcid.from_string("CAFREW")
    seq = DnaLike.from_amino_acid(amino_acid)
    assert seq.translate() == amino_acid
    assert seq.extract_subsequence(3, 6).translate() == AminoAcid.from_string("A")
    assert seq.extract_subsequence(3, 9).translate() == AminoAcid.from_string("AF")
    assert seq.extract_subsequence(3, 18).translate() == AminoAcid.from_string("AFREW")


def test_from_dna_known_and_ambiguous():
    known = DnaLike.from_dna(Dna.from_string("ACGT"))
    ambiguous = DnaLike.from_dna(Dna.from_string("ACNT"))
    assert not known.is_ambiguous()
    assert ambiguous.is_ambiguous()
    assert not known.is_protein()
    assert known.sequence_type() is SequenceType.DNA


def test_protein_properties():
    seq = DnaLike.from_string("CA", "aa")
    assert seq.is_protein()
    assert seq.is_ambiguous()
    assert seq.sequence_type() is SequenceType.PROTEIN
    assert seq.get_string() == "TGYGCN"
    assert len(seq) == 6


def test_from_string_default_is_dna():
    seq = DnaLike.from_string("ACG")
    assert seq.get_string() == "ACG"
    assert seq.sequence_type() is SequenceType.DNA


def test_from_string_errors():
    with pytest.raises(ValueError):
        DnaLike.from_string("ACG", "rna")
    with pytest.raises(ValueError):
        DnaLike.from_string("ACZ", "dna")
    with pytest.raises(ValueError):
        DnaLike.from_string("CAZ", "aa")


def test_protein_len_with_partial_codons():
    seq = DnaLike.from_string("CAF", "aa").extract_subsequence(1, 8)
    assert len(seq) == 7


def test_to_dna_protein_single():
    assert DnaLike.from_string("M", "aa").to_dna() == Dna("ATG")


def test_is_empty():
    assert DnaLike.from_dna(Dna("")).is_empty()
    assert not DnaLike.from_dna(Dna("A")).is_empty()
    assert DnaLike.from_amino_acid(AminoAcid(b"C", 1, 2)).is_empty()


def test_extended_in_frame_dna():
    a = DnaLike.from_string("ACG")
    b = DnaLike.from_string("TTT")
    c = DnaLike.from_string("NNA")
    kk = a.extended_in_frame(b)
    assert kk.get_string() == "ACGTTT"
    assert not kk.is_ambiguous()
    ka = a.extended_in_frame(c)
    assert ka.get_string() == "ACGNNA"
    assert ka.is_ambiguous()
    ak = c.extended_in_frame(a)
    assert ak.get_string() == "NNAACG"
    assert ak.is_ambiguous()


def test_extended_in_frame_dna_then_protein():
    dna = DnaLike.from_string("ACGTA")
    prot = DnaLike.from_string("M", "aa")
    result = dna.extended_in_frame(prot)
    assert result.is_protein()
    assert len(result) == 8
    translated = result.translate()
    assert translated.seq == b"XVM"
    assert translated.start == 1
    assert translated.end == 0


def test_extended_in_frame_protein_then_dna():
    prot = DnaLike.from_string("M", "aa")
    dna = DnaLike.from_string("ACGTA")
    result = prot.extended_in_frame(dna)
    assert len(result) == 8
    translated = result.translate()
    assert translated.seq == b"MTX"
    assert translated.end == 1


def test_extended_in_frame_protein_protein():
    result = DnaLike.from_string("CA", "aa").extended_in_frame(DnaLike.from_string("F", "aa"))
    assert result.translate() == AminoAcid.from_string("CAF")


def test_extended_in_frame_invalid():
    prot = DnaLike.from_string("M", "aa")
    amb = DnaLike.from_string("ANT")
    with pytest.raises(ValueError):
        prot.extended_in_frame(amb)
    with pytest.raises(ValueError):
        amb.extended_in_frame(prot)


@pytest.mark.parametrize(
    "start,end,expected,ambiguous",
    [
        (2, 5, "CAA", False),
        (-1, 5, "NACCAA", True),
        (5, 10, "ATGCN", True),
        (-2, 11, "NNACCAAATGCNN", True),
    ],
)
def test_extract_padded_subsequence_dna(start, end, expected, ambiguous):
    seq = DnaLike.from_string("ACCAAATGC")
    result = seq.extract_padded_subsequence(start, end)
    assert result.get_string() == expected
    assert result.is_ambiguous() is ambiguous


def test_extract_padded_subsequence_ambiguous_to_known():
    result = DnaLike.from_string("NACGT").extract_padded_subsequence(1, 3)
    assert result.get_string() == "AC"
    assert not result.is_ambiguous()


def test_extract_padded_subsequence_protein():
    result = DnaLike.from_string("CAF", "aa").extract_padded_subsequence(-3, 3)
    translated = result.translate()
    assert translated.seq == b"XC"
    assert translated.start == 0
    assert translated.end == 0


def test_reverse_dna_does_not_touch_original():
    original = Dna("ACG")
    seq = DnaLike.from_dna(original)
    seq.reverse()
    assert seq.get_string() == "GCA"
    assert original.seq == "ACG"


def test_reverse_protein_swaps_start_end():
    seq = DnaLike.from_string("CAF", "aa").extract_subsequence(1, 9)
    seq.reverse()
    translated = seq.translate()
    assert translated.seq == b"FAC"
    assert translated.start == 0
    assert translated.end == 1


def test_extract_subsequence_keeps_kind():
    seq = DnaLike.from_string("NACGT").extract_subsequence(1, 3)
    assert seq.get_string() == "AC"
    assert seq.is_ambiguous()