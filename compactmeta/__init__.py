"""Succinct data structures, FASTA/FASTQ reading and EM abundance estimation for metagenomics."""

__version__ = "0.1.0"

__all__ = [
    "abundance",
    "alphabet",
    "assignments",
    "bitvector",
    "gamma",
    "louds",
    "rmmtree",
    "rmq",
    "seqio",
    "tree",
]