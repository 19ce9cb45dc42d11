import hashlib

import pytest

from squarekit.merkle.hashing import encode_byte_slice
from squarekit.merkle.proof import Proof, ProofError, proofs_from_byte_slices
from squarekit.merkle.proof_op import ProofOperators
from squarekit.merkle.proof_value import ValueOp

PAIRS = [(b"alpha", b"one"), (b"beta", b"two"), (b"gamma", b"three")]


def kv_leaf(key, value):
    return encode_byte_slice(key) + encode_byte_slice(hashlib.sha256(value).digest())


@pytest.fixture
def tree():
    root, proofs = proofs_from_byte_slices([kv_leaf(k, v) for k, v in PAIRS])
    return root, proofs


def test_run_returns_root(tree):
    root, proofs = tree
    for (key, value), proof in zip(PAIRS, proofs):
        assert ValueOp(key, proof).run([value]) == [root]


def test_run_wrong_value(tree):
    _, proofs = tree
    with pytest.raises(ProofError, match="leaf hash mismatch"):
        ValueOp(b"alpha", proofs[0]).run([b"wrong"])


def test_run_wrong_arg_count(tree):
    _, proofs = tree
    op = ValueOp(b"alpha", proofs[0])
    with pytest.raises(ProofError, match="expected 1 arg, got 2"):
        op.run([b"one", b"two"])
    with pytest.raises(ProofError, match="expected 1 arg, got 0"):
        op.run([])


def test_verify_through_operators(tree):
    root, proofs = tree
    ops = ProofOperators([ValueOp(b"beta", proofs[1])])
    assert ops.verify_value(root, "/beta", b"two") is None
    with pytest.raises(ProofError, match="key mismatch"):
        ops.verify_value(root, "/alpha", b"two")
    with pytest.raises(ProofError, match="calculated root hash is invalid"):
        ops.verify_value(b"\x00" * 32, "/beta", b"two")


def test_get_key_and_str(tree):
    _, proofs = tree
    op = ValueOp(b"\x01\x02\x03", proofs[0])
    assert op.get_key() == b"\x01\x02\x03"
    assert str(op) == "ValueOp{[1 2 3]}"


def test_vsa_2022_100_forged_membership_rejected():
    key = b"\x13"
    value = b"\x37"
    vhash = hashlib.sha256(value).digest()
    kvhash = hashlib.sha256(
        b"\x00" + encode_byte_slice(key) + encode_byte_slice(vhash)
    ).digest()
    op = ValueOp(key, Proof(leaf_hash=kvhash))
    with pytest.raises(ValueError):
        ProofOperators([op]).verify(None, "/" + key.decode(), [value])