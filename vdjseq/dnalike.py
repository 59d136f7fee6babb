"""Sequences that are known DNA, degenerate DNA, or reverse-translated protein."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from vdjseq.dna import AminoAcid, Dna

_KNOWN = frozenset("ACGT")


class SequenceType(Enum):
    """Whether a sequence was given as nucleotides or as amino acids."""

    DNA = "dna"
    PROTEIN = "aa"


class _Kind(Enum):
    KNOWN = "known"
    AMBIGUOUS = "ambiguous"
    PROTEIN = "protein"


def _classify(seq: Dna) -> _Kind:
    return _Kind.KNOWN if all(c in _KNOWN for c in seq.seq) else _Kind.AMBIGUOUS


@dataclass
class DnaLike:
    """A nucleotide-like sequence whose handling depends on what is known of it.

    Build instances with `from_dna`, `from_amino_acid` or `from_string`.
    """

    inner: Union[Dna, AminoAcid]
    kind: _Kind

    @staticmethod
    def from_dna(seq: Dna) -> DnaLike:
        """Wrap a DNA sequence, marking it ambiguous if it holds degenerate nucleotides."""
        return DnaLike(seq, _classify(seq))

    @staticmethod
    def from_amino_acid(seq: AminoAcid) -> DnaLike:
        """Wrap an amino-acid sequence."""
        return DnaLike(seq, _Kind.PROTEIN)

    @staticmethod
    def from_string(s: str, sequence_type: str = "dna") -> DnaLike:
        """Load from nucleotides (sequence_type "dna") or amino acids ("aa")."""
        if sequence_type == "dna":
            return DnaLike.from_dna(Dna.from_string(s))
        if sequence_type == "aa":
            return DnaLike.from_amino_acid(AminoAcid.from_string(s))
        raise ValueError(
            'Wrong `sequence_type`, can be either "dna" (nucleotides) or "aa" (amino-acid)'
        )

    def __repr__(self) -> str:
        return repr(self.inner)

    def __len__(self) -> int:
        if self.kind is _Kind.PROTEIN:
            return 3 * len(self.inner.seq) - self.inner.start - self.inner.end
        return len(self.inner)

    def to_dna(self) -> Dna:
        """Return the sequence as DNA; lossy for proteins."""
        if self.kind is _Kind.PROTEIN:
            return self.inner.to_dna()
        return Dna(self.inner.seq)

    def get_string(self) -> str:
        return self.to_dna().get_string()

    def translate(self) -> AminoAcid:
        return self.inner.translate()

    def is_empty(self) -> bool:
        return self.inner.is_empty()

    def is_protein(self) -> bool:
        return self.kind is _Kind.PROTEIN

    def is_ambiguous(self) -> bool:
        return self.kind is not _Kind.KNOWN

    def sequence_type(self) -> SequenceType:
        return SequenceType.PROTEIN if self.is_protein() else SequenceType.DNA

    def reverse(self) -> None:
        """Reverse the sequence in place (ATTG -> GTTA)."""
        if self.kind is _Kind.PROTEIN:
            self.inner = AminoAcid(self.inner.seq[::-1], self.inner.end, self.inner.start)
        else:
            self.inner = Dna(self.inner.seq[::-1])

    def extended_in_frame(self, other: DnaLike) -> DnaLike:
        """Concatenate self and other, keeping protein sequences in frame."""
        a, b = self.kind, other.kind
        x, y = self.inner, other.inner
        if a is _Kind.KNOWN and b is _Kind.KNOWN:
            return DnaLike(x.extended(y), _Kind.KNOWN)
        if a is not _Kind.PROTEIN and b is not _Kind.PROTEIN:
            return DnaLike(x.extended(y), _Kind.AMBIGUOUS)
        if a is _Kind.KNOWN and b is _Kind.PROTEIN:
            return DnaLike(y.append_to_dna_in_frame(x), _Kind.PROTEIN)
        if a is _Kind.PROTEIN and b is _Kind.KNOWN:
            return DnaLike(x.extend_with_dna_in_frame(y), _Kind.PROTEIN)
        if a is _Kind.PROTEIN and b is _Kind.PROTEIN:
            return DnaLike(x.extended(y), _Kind.PROTEIN)
        raise ValueError("Not a valid extension")

    def extract_subsequence(self, start: int, end: int) -> DnaLike:
        """Return positions start..end (in nucleotides), keeping the kind."""
        return DnaLike(self.inner.extract_subsequence(start, end), self.kind)

    def extract_padded_subsequence(self, start: int, end: int) -> DnaLike:
        """Return positions start..end, padded where the range leaves the sequence."""
        result = self.inner.extract_padded_subsequence(start, end)
        if self.kind is _Kind.PROTEIN:
            return DnaLike(result, _Kind.PROTEIN)
        return DnaLike(result, _classify(result))