"""RNA secondary structure: parsing, motifs, poses, helices and sequence constraints."""

__version__ = "0.1.0"