"""Nucleotide and amino-acid alphabets, with the lookups between them.

Single symbols may be given as one-character strings or as byte values
(integers). Amino-acid sequences can also hold fully known codons, stored
as byte values from 128 to 191.
"""

from __future__ import annotations

from typing import Iterable, Union

Symbol = Union[str, int]

# Index standing for a nucleotide that is present but unknown.
BLANK = 4
BLANKN = "N"

# Standard nucleotides first, then the IUPAC degenerate codes.
# R: A/G, Y: T/C, S: C/G, W: A/T, K: G/T, M: A/C,
# B: C/G/T, D: A/G/T, H: A/C/T, V: A/C/G
NUCLEOTIDES = "ACGTNRYSWKMBDHV"

AMINOACIDS = "ACDEFGHILKMNPQRSTVWY*"

CODON_OFFSET = 128
ALL_POSSIBLE_CODONS_AA: tuple[int, ...] = tuple(ord(a) for a in AMINOACIDS) + tuple(
    range(CODON_OFFSET, CODON_OFFSET + 64)
)

NUCLEOTIDES_INV: dict[str, int] = {n: i for i, n in enumerate(NUCLEOTIDES)}

COMPLEMENT: dict[str, str] = {
    "A": "T", "T": "A", "G": "C", "C": "G", "N": "N",
    "R": "Y", "Y": "R", "S": "S", "W": "W", "K": "M",
    "M": "K", "B": "V", "D": "H", "H": "D", "V": "B",
}

DNA_TO_AMINO: dict[str, str] = {
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L", "TCT": "S", "TCC": "S",
    "TCA": "S", "TCG": "S", "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W", "CTT": "L", "CTC": "L",
    "CTA": "L", "CTG": "L", "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q", "CGT": "R", "CGC": "R",
    "CGA": "R", "CGG": "R", "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T", "AAT": "N", "AAC": "N",
    "AAA": "K", "AAG": "K", "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V", "GCT": "A", "GCC": "A",
    "GCA": "A", "GCG": "A", "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}

# Lossy reverse translation: one degenerate codon per amino acid.
_AMINO_TO_DNA_LOSSY: dict[str, str] = {
    "A": "GCN", "C": "TGY", "D": "GAY", "E": "GAR", "F": "TTY",
    "G": "GGN", "H": "CAY", "I": "ATH", "L": "YTN", "K": "AAR",
    "M": "ATG", "N": "AAY", "P": "CCN", "Q": "CAR", "R": "MGN",
    "S": "WSN", "T": "ACN", "V": "GTN", "W": "TGG", "Y": "TAY",
    "*": "TRR",
}

# Bit masks over A=1, C=2, G=4, T=8.
_MASKS: dict[str, int] = {
    "A": 0b0001, "C": 0b0010, "G": 0b0100, "T": 0b1000, "N": 0b1111,
    "R": 0b0101, "Y": 0b1010, "S": 0b0110, "W": 0b1001, "K": 0b1100,
    "M": 0b0011, "B": 0b1110, "D": 0b1101, "H": 0b1011, "V": 0b0111,
}
_MASK_TO_NUCLEOTIDE: dict[int, str] = {m: n for n, m in _MASKS.items()}

_DEGENERATE_TO_INDICES: dict[str, list[int]] = {
    "A": [0], "T": [3], "G": [2], "C": [1], "N": [0, 1, 2, 3],
    "R": [0, 2], "Y": [1, 3], "S": [1, 2], "W": [0, 3], "K": [2, 3],
    "M": [0, 1], "B": [1, 2, 3], "D": [0, 2, 3], "H": [0, 1, 3], "V": [0, 1, 2],
}


def _code(x: Symbol) -> int:
    """Byte value of a symbol given as a one-character string or an integer."""
    if isinstance(x, str):
        if len(x) != 1:
            raise ValueError(f"Expected a single character, got {x!r}")
        return ord(x)
    return int(x)


def _char(x: Symbol) -> str:
    return x if isinstance(x, str) else chr(x)


def amino_to_dna_lossy(x: Symbol) -> str:
    """Return a (possibly degenerate) codon for an amino acid or an encoded codon."""
    code = _code(x)
    if code < ord("Z"):
        try:
            return _AMINO_TO_DNA_LOSSY[chr(code)]
        except KeyError:
            raise ValueError(f"Invalid amino acid: {chr(code)!r}") from None
    value = code - CODON_OFFSET
    if not 0 <= value < 64:
        raise ValueError(f"Invalid encoded codon: {code}")
    return NUCLEOTIDES[value % 4] + NUCLEOTIDES[(value // 4) % 4] + NUCLEOTIDES[value // 16]


def degenerate_nucleotide(x: Iterable[Symbol]) -> str:
    """Return the degenerate nucleotide that matches every nucleotide in `x`."""
    mask = 0
    for symbol in x:
        mask |= _MASKS.get(_char(symbol), 0)
    if mask == 0:
        raise ValueError("No valid nucleotide given")
    return _MASK_TO_NUCLEOTIDE[mask]


def is_degenerate(x: Symbol) -> bool:
    """True unless the symbol is one of A, C, G, T."""
    return _char(x) not in "ACGT" or (isinstance(x, str) and len(x) != 1)


def codon_to_amino_acid(codon: Iterable[Symbol]) -> str:
    """Return the amino acid a (degenerate) codon codes for, or 'X' if not unique."""
    c0, c1, c2 = (_char(s) for s in codon)
    valid = {
        amino
        for triplet, amino in DNA_TO_AMINO.items()
        if compatible_nucleotides(c0, triplet[0])
        and compatible_nucleotides(c1, triplet[1])
        and compatible_nucleotides(c2, triplet[2])
    }
    if len(valid) == 1:
        return valid.pop()
    return "X"


def intersect_nucleotides(x: Symbol, y: Symbol) -> int:
    """Bit mask (A=1, C=2, G=4, T=8) of the nucleotides allowed by both symbols."""
    return _MASKS.get(_char(x), 0) & _MASKS.get(_char(y), 0)


def degenerate_dna_to_vec(x: Symbol) -> list[int]:
    """Indices (A, C, G, T = 0, 1, 2, 3) of the nucleotides a symbol stands for."""
    try:
        return list(_DEGENERATE_TO_INDICES[_char(x)])
    except KeyError:
        raise ValueError("Wrong character in dna sequence.") from None


def compatible_nucleotides(x: Symbol, y: Symbol) -> bool:
    """True if the two symbols can stand for the same nucleotide."""
    return intersect_nucleotides(x, y) != 0


def nucleotides_inv(n: Symbol) -> int:
    """Index of a nucleotide in NUCLEOTIDES (0 for unknown symbols)."""
    return NUCLEOTIDES_INV.get(_char(n), 0)