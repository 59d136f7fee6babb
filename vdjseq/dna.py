"""Nucleotide and amino-acid sequences."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product

from vdjseq.nucleotides import (
    AMINOACIDS,
    CODON_OFFSET,
    COMPLEMENT,
    DNA_TO_AMINO,
    NUCLEOTIDES,
    NUCLEOTIDES_INV,
    amino_to_dna_lossy,
    compatible_nucleotides,
    degenerate_dna_to_vec,
    nucleotides_inv,
)

_KNOWN = "ACGT"


@dataclass
class Dna:
    """A nucleotide sequence, possibly holding degenerate nucleotides."""

    seq: str = ""

    def __hash__(self) -> int:
        return hash(self.seq)

    def __str__(self) -> str:
        return self.seq

    def __repr__(self) -> str:
        return f"Dna({self.seq})"

    def __len__(self) -> int:
        return len(self.seq)

    @staticmethod
    def from_string(s: str) -> Dna:
        """Build a sequence, rejecting characters that are not nucleotides."""
        for char in s:
            if char not in NUCLEOTIDES_INV:
                raise ValueError(f"Invalid byte: {ord(char)}")
        return Dna(s)

    @staticmethod
    def from_matrix_idx(idx: int) -> Dna:
        """Inverse of `to_matrix_idx`: the dinucleotide for an index in 0..16."""
        return Dna(NUCLEOTIDES[idx // 4] + NUCLEOTIDES[idx % 4])

    def to_matrix_idx(self) -> list[int]:
        """For a sequence of length 2, return [4 * n0 + n1]."""
        if len(self.seq) != 2:
            raise ValueError("to_matrix_idx needs a sequence of length 2")
        return [4 * nucleotides_inv(self.seq[0]) + nucleotides_inv(self.seq[1])]

    def valid_extremities(self) -> list[tuple[int, int]]:
        """All (left, right) dinucleotide indices around this sequence."""
        pairs = []
        for idx_left in range(16):
            full = Dna.from_matrix_idx(idx_left).extended(self)
            idx_right = full.extract_subsequence(len(full) - 2, len(full)).to_matrix_idx()
            pairs.append((idx_left, idx_right[0]))
        return pairs

    def get_string(self) -> str:
        return self.seq

    def translate(self) -> AminoAcid:
        """Translate codon by codon; codons with degenerate nucleotides are dropped."""
        if len(self.seq) % 3 != 0:
            raise ValueError("Translation not possible, invalid length.")
        aminos = (
            DNA_TO_AMINO.get(self.seq[i : i + 3]) for i in range(0, len(self.seq), 3)
        )
        return AminoAcid("".join(a for a in aminos if a is not None).encode("ascii"))

    def to_codons(self) -> AminoAcid:
        """Encode each fully known codon as a byte value from 128 to 191."""
        if len(self.seq) % 3 != 0:
            raise ValueError("Translation not possible, invalid length.")
        if any(char not in _KNOWN for char in self.seq):
            raise ValueError("Cannot encode codons holding degenerate nucleotides")
        codes = bytes(
            CODON_OFFSET
            + 16 * nucleotides_inv(self.seq[i])
            + 4 * nucleotides_inv(self.seq[i + 1])
            + nucleotides_inv(self.seq[i + 2])
            for i in range(0, len(self.seq), 3)
        )
        return AminoAcid(codes)

    def is_empty(self) -> bool:
        return not self.seq

    def extended(self, other: Dna) -> Dna:
        """Return self followed by other."""
        return Dna(self.seq + other.seq)

    def extend(self, other: Dna) -> None:
        """Append other to this sequence in place."""
        self.seq += other.seq

    def reverse(self) -> None:
        """Reverse the sequence in place."""
        self.seq = self.seq[::-1]

    def to_dnas(self) -> list[Dna]:
        """All non-degenerate variants of the sequence (ANT -> AAT, ACT, AGT, ATT)."""
        options = [[NUCLEOTIDES[i] for i in degenerate_dna_to_vec(c)] for c in self.seq]
        # the first position varies fastest
        return [Dna("".join(reversed(combo))) for combo in product(*reversed(options))]

    def hamming_distance(self, other: Dna) -> int:
        """Number of incompatible positions, over the shorter length."""
        return sum(1 for x, y in zip(self.seq, other.seq) if not compatible_nucleotides(x, y))

    def count_differences(self, template: Dna) -> int:
        return self.hamming_distance(template)

    def hamming_distance_index_slice(self, d, start: int, end: int) -> int:
        """Distance to the nucleotide indices d[start:3 - end] of a codon."""
        if start + end > 3:
            raise ValueError("start + end must be at most 3")
        if start + end == 3:
            return 0
        return sum(
            1
            for x, y in zip(self.seq, d[start : 3 - end])
            if not compatible_nucleotides(x, NUCLEOTIDES[y])
        )

    def reverse_complement(self) -> Dna:
        return Dna("".join(COMPLEMENT[c] for c in reversed(self.seq) if c in COMPLEMENT))

    def extract_subsequence(self, start: int, end: int) -> Dna:
        """Return dna[start:end]."""
        if not 0 <= start <= end <= len(self.seq):
            raise IndexError(f"Invalid range {start}..{end} for length {len(self.seq)}")
        return Dna(self.seq[start:end])

    def extract_padded_subsequence(self, start: int, end: int) -> Dna:
        """Return dna[start:end], padded with N where the range leaves the sequence."""
        length = len(self.seq)
        left = "N" * -start if start < 0 else ""
        middle = self.seq[max(0, start) : min(length, end)] if start < length else ""
        right = "N" * (end - length) if end > length else ""
        return Dna(left + middle + right)


@dataclass
class AminoAcid:
    """An amino-acid sequence, possibly starting or ending inside a codon.

    `seq` holds amino-acid letters, 'X' for unknown codons, or fully known
    codons encoded as byte values from 128 to 191. `start` and `end` count
    the nucleotides cut from the first and the last codon.
    """

    seq: bytes = b""
    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        self.seq = bytes(self.seq)

    def __str__(self) -> str:
        return self.get_string()

    def __repr__(self) -> str:
        return f"AminoAcid({self.get_string()}, start={self.start}, end={self.end})"

    @staticmethod
    def from_string(s: str) -> AminoAcid:
        """Build a sequence, rejecting characters that are not amino acids."""
        for char in s:
            if char not in AMINOACIDS:
                raise ValueError(f"Invalid byte: {ord(char)}")
        return AminoAcid(s.encode("ascii"))

    def get_string(self) -> str:
        return self.seq.decode("utf-8", errors="replace")

    def translate(self) -> AminoAcid:
        """Replace encoded codons by the amino acid they code for."""

        def amino(x: int) -> int:
            if x <= ord("Z"):
                return x
            y = x - CODON_OFFSET
            codon = NUCLEOTIDES[y // 16] + NUCLEOTIDES[(y // 4) % 4] + NUCLEOTIDES[y % 4]
            return ord(DNA_TO_AMINO[codon])

        return AminoAcid(bytes(amino(x) for x in self.seq), self.start, self.end)

    def _require_full(self) -> None:
        if self.start != 0 or self.end != 0:
            raise ValueError("Sequence must start and end on a codon boundary")

    def append_to_dna_in_frame(self, seq: Dna) -> AminoAcid:
        """Put a DNA sequence in front of this full amino-acid sequence."""
        self._require_full()
        rem = len(seq) % 3
        pre = seq.extract_subsequence(rem, len(seq)).to_codons().seq
        if rem:
            pre = b"X" + pre
        return AminoAcid(pre + self.seq, (3 - rem) % 3, 0)

    def extend_with_dna_in_frame(self, seq: Dna) -> AminoAcid:
        """Put a DNA sequence after this full amino-acid sequence."""
        self._require_full()
        rem = len(seq) % 3
        post = seq.extract_subsequence(0, len(seq) - rem).to_codons().seq
        if rem:
            post = post + b"X"
        return AminoAcid(self.seq + post, 0, (3 - rem) % 3)

    def extended(self, other: AminoAcid) -> AminoAcid:
        """Concatenate two full amino-acid sequences."""
        self._require_full()
        other._require_full()
        return AminoAcid(self.seq + other.seq)

    def extract_subsequence(self, start: int, end: int) -> AminoAcid:
        """Extract a subsequence given in nucleotide positions."""
        shift_start = start + self.start
        shift_end = end + self.start
        if start < 0 or start > end or end > 3 * len(self.seq):
            raise IndexError(f"Invalid range {start}..{end}")
        aa_start = shift_start // 3
        aa_end = (shift_end + 2) // 3
        return AminoAcid(self.seq[aa_start:aa_end], shift_start % 3, 3 * aa_end - shift_end)

    def extract_padded_subsequence(self, start: int, end: int) -> AminoAcid:
        """Extract nucleotide positions start..end, padding with unknown codons."""
        cpos = start + self.start
        dpos = (cpos // 3) * 3
        hpos = end + self.start
        epos = hpos if hpos % 3 == 0 else (hpos // 3) * 3 + 3
        length = len(self.seq)
        codes = bytes(
            self.seq[i] if 0 <= i < length else ord("X") for i in range(dpos // 3, epos // 3)
        )
        return AminoAcid(codes, cpos - dpos, epos - hpos)

    def is_empty(self) -> bool:
        return len(self.seq) == 0 or (len(self.seq) == 1 and self.start + self.end == 3)

    def to_dna(self) -> Dna:
        """Reverse-translate into (possibly degenerate) DNA; lossy."""
        full = "".join(amino_to_dna_lossy(x) for x in self.seq)
        return Dna(full[self.start : len(full) - self.end])

    def reverse(self) -> None:
        """Reverse the codons in place, swapping start and end."""
        self.seq = self.seq[::-1]
        self.start, self.end = self.end, self.start