"""RFC-6962 Merkle trees, inclusion proofs, key paths and proof operators."""

__all__ = ["hashing", "tree", "proof", "key_path", "proof_op", "proof_value"]