"""Namespaces, blobs, Merkle proofs and share commitment layout rules for data squares."""

__version__ = "0.1.0"
__all__ = ["namespace", "blob", "merkle", "commitment_rules", "mountain_range"]