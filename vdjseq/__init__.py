"""Nucleotide and amino-acid sequence types with degenerate-base support, and array normalisation helpers."""

__version__ = "0.1.0"
__all__ = ["utils", "nucleotides", "dna", "dnalike"]