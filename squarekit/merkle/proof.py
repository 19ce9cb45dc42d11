"""Merkle inclusion proofs.

Proofs include the leaf hash but exclude the root hash.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Sequence

from squarekit.merkle.hashing import empty_hash, inner_hash, leaf_hash
from squarekit.merkle.tree import get_split_point

MAX_AUNTS = 100
"""Largest number of aunts a proof may hold (a tree of 2**100 leaves)."""

_HASH_SIZE = hashlib.sha256().digest_size


class ProofError(ValueError):
    """Raised when a proof is malformed or does not verify."""


@dataclass
class Proof:
    """Proof that a leaf at `index` belongs to a tree of `total` leaves."""

    total: int = 0
    index: int = 0
    leaf_hash: bytes = b""
    aunts: list[bytes] = field(default_factory=list)

    def verify(self, root_hash: bytes | None, leaf: bytes) -> None:
        """Check that the proof proves `leaf` under `root_hash`; raise ProofError if not."""
        if root_hash is None:
            raise ProofError("invalid root hash: cannot be nil")
        if self.total < 0:
            raise ProofError("proof total must be positive")
        if self.index < 0:
            raise ProofError("proof index cannot be negative")
        expected_leaf = leaf_hash(leaf)
        if self.leaf_hash != expected_leaf:
            raise ProofError(
                f"invalid leaf hash: wanted {expected_leaf.hex().upper()} "
                f"got {self.leaf_hash.hex().upper()}"
            )
        try:
            computed = self.compute_root_hash()
        except ProofError as err:
            raise ProofError(f"compute root hash: {err}") from err
        if computed != root_hash:
            raise ProofError(
                f"invalid root hash: wanted {bytes(root_hash).hex().upper()} "
                f"got {computed.hex().upper()}"
            )

    def compute_root_hash(self) -> bytes:
        """Return the root implied by the leaf hash and aunts."""
        return compute_hash_from_aunts(self.index, self.total, self.leaf_hash, self.aunts)

    def validate_basic(self) -> None:
        """Check sizes and bounds of the proof fields; raise ProofError if invalid."""
        if self.total < 0:
            raise ProofError("negative Total")
        if self.index < 0:
            raise ProofError("negative Index")
        if len(self.leaf_hash) != _HASH_SIZE:
            raise ProofError(
                f"expected LeafHash size to be {_HASH_SIZE}, got {len(self.leaf_hash)}"
            )
        if len(self.aunts) > MAX_AUNTS:
            raise ProofError(
                f"expected no more than {MAX_AUNTS} aunts, got {len(self.aunts)}"
            )
        for i, aunt in enumerate(self.aunts):
            if len(aunt) != _HASH_SIZE:
                raise ProofError(
                    f"expected Aunts#{i} size to be {_HASH_SIZE}, got {len(aunt)}"
                )

    def __str__(self) -> str:
        return self.string_indented("")

    def string_indented(self, indent: str) -> str:
        """Return a canonical multi-line representation of the proof."""
        aunts = " ".join(aunt.hex().upper() for aunt in self.aunts)
        return f"Proof{{\n{indent}  Aunts: [{aunts}]\n{indent}}}"


@dataclass(eq=False, repr=False)
class ProofNode:
    """Node of the throw-away tree used to collect a leaf's aunts.

    Exactly one of `left` and `right` is set, except on the root where both
    are None.
    """

    hash: bytes
    parent: ProofNode | None = None
    left: ProofNode | None = None
    right: ProofNode | None = None

    def flatten_aunts(self) -> list[bytes]:
        """Return the sibling hashes from this node up to the root."""
        aunts: list[bytes] = []
        node: ProofNode | None = self
        while node is not None:
            sibling = node.left or node.right
            if sibling is not None:
                aunts.append(sibling.hash)
            node = node.parent
        return aunts


def trails_from_byte_slices(items: Sequence[bytes]) -> tuple[list[ProofNode], ProofNode]:
    """Build the proof tree; return the leaf nodes in order and the root node."""
    items = list(items)
    if not items:
        return [], ProofNode(empty_hash())
    if len(items) == 1:
        trail = ProofNode(leaf_hash(items[0]))
        return [trail], trail
    k = get_split_point(len(items))
    lefts, left_root = trails_from_byte_slices(items[:k])
    rights, right_root = trails_from_byte_slices(items[k:])
    root = ProofNode(inner_hash(left_root.hash, right_root.hash))
    left_root.parent = root
    left_root.right = right_root
    right_root.parent = root
    right_root.left = left_root
    return lefts + rights, root


def proofs_from_byte_slices(items: Sequence[bytes]) -> tuple[bytes, list[Proof]]:
    """Return the root hash and one inclusion proof per item, in order."""
    trails, root = trails_from_byte_slices(items)
    total = len(trails)
    proofs = [
        Proof(total=total, index=i, leaf_hash=trail.hash, aunts=trail.flatten_aunts())
        for i, trail in enumerate(trails)
    ]
    return root.hash, proofs


def compute_hash_from_aunts(
    index: int, total: int, leaf_hash: bytes, inner_hashes: Sequence[bytes]
) -> bytes:
    """Return the root hash from a leaf hash and its aunts; raise ProofError on mismatch."""
    if index >= total or index < 0 or total <= 0:
        raise ProofError(f"invalid index {index} and/or total {total}")
    if total == 1:
        if inner_hashes:
            raise ProofError("unexpected inner hashes")
        return leaf_hash
    if not inner_hashes:
        raise ProofError("expected at least one inner hash")
    num_left = get_split_point(total)
    rest, last = inner_hashes[:-1], inner_hashes[-1]
    if index < num_left:
        left = compute_hash_from_aunts(index, num_left, leaf_hash, rest)
        return inner_hash(left, last)
    right = compute_hash_from_aunts(index - num_left, total - num_left, leaf_hash, rest)
    return inner_hash(last, right)