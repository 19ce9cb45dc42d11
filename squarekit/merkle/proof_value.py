"""Proof operator for a single key/value leaf of a simple map tree."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Sequence

from squarekit.merkle.hashing import encode_byte_slice, leaf_hash
from squarekit.merkle.proof import Proof, ProofError
from squarekit.merkle.proof_op import ProofOperator

PROOF_OP_VALUE = "simple:v"


@dataclass
class ValueOp(ProofOperator):
    """Proves that `key` maps to a value by hashing the pair into a leaf."""

    key: bytes
    proof: Proof

    def run(self, args: Sequence[bytes]) -> list[bytes]:
        """Return the root hash for the single value in `args`."""
        if len(args) != 1:
            raise ProofError(f"expected 1 arg, got {len(args)}")
        vhash = hashlib.sha256(bytes(args[0])).digest()
        kvhash = leaf_hash(encode_byte_slice(self.key) + encode_byte_slice(vhash))
        if kvhash != self.proof.leaf_hash:
            raise ProofError(
                f"leaf hash mismatch: want {bytes(self.proof.leaf_hash).hex().upper()} "
                f"got {kvhash.hex().upper()}"
            )
        return [self.proof.compute_root_hash()]

    def get_key(self) -> bytes:
        return bytes(self.key)

    def __str__(self) -> str:
        return "ValueOp{[" + " ".join(str(b) for b in bytes(self.key)) + "]}"