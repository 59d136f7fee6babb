# vdjseq

Sequence types for immune-receptor (V(D)J) work: nucleotide sequences that may
hold IUPAC degenerate bases, amino-acid sequences that keep track of partial
codons, and a wrapper that treats either one as DNA. The package also has
helpers that normalise probability tables stored as NumPy arrays.

## Installation

```
pip install vdjseq
```

To run the tests:

```
pip install "vdjseq[test]"
pytest
```

## Nucleotides

`vdjseq.nucleotides` works on single bases, given as one-character strings or
byte values, including the degenerate codes `N R Y S W K M B D H V`:

```python
from vdjseq.nucleotides import (
    compatible_nucleotides, degenerate_nucleotide, codon_to_amino_acid,
    degenerate_dna_to_vec,
)

compatible_nucleotides("R", "A")   # True  (R is A or G)
degenerate_nucleotide("AG")        # "R"
codon_to_amino_acid("GCN")         # "A"; "X" when the codon is ambiguous
degenerate_dna_to_vec("Y")         # [1, 3]  (C, T)
```

The module also holds the alphabets (`NUCLEOTIDES`, `AMINOACIDS`), the
codon table `DNA_TO_AMINO`, `COMPLEMENT`, and the helpers
`amino_to_dna_lossy`, `is_degenerate`, `intersect_nucleotides` and
`nucleotides_inv`.

## DNA and amino acids

```python
from vdjseq.dna import Dna, AminoAcid

dna = Dna.from_string("ACCAAATGC")
dna.extract_padded_subsequence(-1, 5).get_string()   # "NACCAA"
dna.translate().get_string()                          # "TKC"
dna.reverse_complement().get_string()                 # "GCATTTGGT"
Dna.from_string("ANT").to_dnas()                      # AAT, ACT, AGT, ATT

protein = AminoAcid.from_string("CAFREW")
protein.to_dna().get_string()     # DNA with degenerate bases where codons differ
protein.extract_subsequence(3, 9).translate().get_string()   # "AF"
```

`AminoAcid` positions are counted in nucleotides; `start` and `end` record how
many nucleotides are cut from the first and last codon. Fully known codons can
be stored inside an amino-acid sequence as byte values 128–191
(`Dna.to_codons`), which lets DNA be joined to a protein in frame with
`append_to_dna_in_frame` and `extend_with_dna_in_frame`.

Errors:

- a character that is not a nucleotide, or not an amino acid, raises `ValueError`;
- translating or encoding a sequence whose length is not a multiple of three
  raises `ValueError`, and so does `to_codons` on degenerate nucleotides;
- `extract_subsequence` with a range outside the sequence raises `IndexError`.

## One type for both

`DnaLike` holds known DNA, degenerate DNA or a protein. It offers the same
operations whatever it holds:

```python
from vdjseq.dna import AminoAcid
from vdjseq.dnalike import DnaLike, SequenceType

seq = DnaLike.from_amino_acid(AminoAcid.from_string("CAFREW"))
seq.extract_subsequence(3, 9).translate().get_string()   # "AF"
seq.sequence_type() is SequenceType.PROTEIN               # True
len(seq)                                                  # 18

dna = DnaLike.from_string("ACGN", "dna")
dna.is_ambiguous()                                        # True
```

`DnaLike.from_string` accepts `"dna"` or `"aa"` as the sequence type. Any other
value raises `ValueError`. `extended_in_frame` joins two sequences; joining
degenerate DNA with a protein raises `ValueError`.

## Normalising distributions

`vdjseq.utils` normalises NumPy arrays along set axes. Slices that sum to zero
come back as zeros:

```python
import numpy as np
from vdjseq.utils import normalize_distribution

normalize_distribution(np.array([[0.0, 2.0, 3.0], [2.0, 3.0, 3.0]]))
# array([[0. , 0.4, 0.5],
#        [1. , 0.6, 0.5]])
```

The module also has `normalize_last`, `normalize_last_2`,
`normalize_distribution_double`, `normalize_distribution_3`,
`normalize_transition_matrix` and some small helpers: `insert_in_order`,
`max_of_array`, `max_f64`, `mod_euclid`, `count_differences`,
`difference_as_i64`, `sorted_and_complete`, `sorted_and_complete_0start` and
`send_warning`, plus the `RecordModel` dataclass describing a stored model's
files.

## What this package does not do

It provides sequence types and array helpers only. It does not align
sequences against genes, load or store recombination models, generate
sequences, or compute generation probabilities, and it has no command-line
program.