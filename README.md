# squarekit

Building blocks for laying out data in a square of shares:

- **Namespaces** (`squarekit.namespace`): 29-byte namespaces made of a one-byte
  version and a 28-byte ID. Validation, the reserved protocol namespaces,
  byte-wise ordering, and helpers that produce random namespaces.
- **Blobs** (`squarekit.blob`): a blob of data tied to a namespace and a share
  version. Blobs can be validated and sorted by namespace.
- **Merkle trees** (`squarekit.merkle`): RFC-6962 style Merkle roots over byte
  strings (`tree`, `hashing`), inclusion proofs (`proof`), key paths
  (`key_path`), chained proof operators (`proof_op`) and a key/value proof
  operator (`proof_value`).
- **Share commitment rules** (`squarekit.commitment_rules`,
  `squarekit.mountain_range`): where a blob may start in the square and how a
  number of shares splits into the trees of a Merkle mountain range.

## Installation

```
pip install squarekit
```

No third-party libraries are needed at run time.

## Examples

### Namespaces

```python
from squarekit.namespace import new_v0, from_bytes, random_blob_namespace

ns = new_v0(b"my-app")
raw = ns.to_bytes()            # 29 bytes: version, then the ID
assert from_bytes(raw) == ns
assert not ns.is_reserved()

user_ns = random_blob_namespace()   # a random, non-reserved version 0 namespace
```

`new`, `new_v0` and `from_bytes` raise `ValueError` for an unsupported version
(only 0 and 255 are accepted), an ID that is not 28 bytes, a version 0 ID
without its 18 leading zero bytes, or a sub-ID longer than 10 bytes.
Namespaces compare with `<`, `<=`, `>` and `>=` by their byte encoding.

### Blobs

```python
from squarekit.blob import new_blob, sort_blobs

blobs = [new_blob(ns, b"hello", 0)]
for blob in blobs:
    blob.validate()            # raises ValueError if the blob is malformed
sort_blobs(blobs)              # stable, in place, by namespace
```

### Merkle roots and proofs

```python
from squarekit.merkle.tree import hash_from_byte_slices
from squarekit.merkle.proof import proofs_from_byte_slices

items = [b"apple", b"watermelon", b"kiwi"]
root = hash_from_byte_slices(items)
root2, proofs = proofs_from_byte_slices(items)
assert root == root2
proofs[1].verify(root, b"watermelon")   # raises ProofError on failure
proofs[1].validate_basic()              # checks hash sizes and at most 100 aunts
```

Leaves are hashed as `sha256(0x00 || leaf)`, inner nodes as
`sha256(0x01 || left || right)`, and the empty tree is `sha256("")`.
`hash_from_byte_slices_iterative` computes the same root level by level.

### Key paths

```python
from squarekit.merkle.key_path import KeyPath, KeyEncoding, key_path_to_keys

path = KeyPath().append_key(b"App", KeyEncoding.URL).append_key(b"\x01\x02", KeyEncoding.HEX)
assert str(path) == "/App/x:0102"
assert key_path_to_keys(str(path)) == [b"App", b"\x01\x02"]
```

### Chained proof operators

`ProofOperators` is a list of `ProofOperator` objects, each turning its input
values into the root of one tree. `verify(root, keypath, args)` runs them in
order, matching each operator's key against the key path from its last part
backwards, and checks the final output against `root`; `verify_from_keys`
takes the keys directly. `ValueOp` proves a single key/value leaf.
`ProofRuntime` decodes `ProofOp` records with decoders registered through
`register_op_decoder` and then verifies them; it starts with no decoders.

### Share commitment layout

```python
from squarekit.commitment_rules import next_share_index, sub_tree_width
from squarekit.mountain_range import merkle_mountain_range_sizes

next_share_index(1, 4096, 64)            # 64
sub_tree_width(129, 64)                  # 4
merkle_mountain_range_sizes(11, 4)       # [4, 4, 2, 1]
```

## What it does not do

The package does not split blobs into shares, build namespaced Merkle trees, or
compute share commitments; it gives the layout rules and mountain range sizes
that such a computation uses. It has no wire encoding for blobs, blob
transactions or proof operators: `ProofOp.data` is carried as opaque bytes.

## Running the tests

```
pip install "squarekit[test]"
pytest
```