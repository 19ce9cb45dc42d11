import pytest

from squarekit.blob import Blob, new_blob, sort_blobs
from squarekit.namespace import (
    NAMESPACE_VERSION_ZERO,
    PARITY_SHARES_NAMESPACE,
    TX_NAMESPACE,
    new_v0,
)

NS_A = new_v0(b"a")
NS_B = new_v0(b"b")


def test_new_blob_fields():
    blob = new_blob(NS_A, b"payload", 0)
    assert blob.namespace_id == NS_A.id
    assert blob.data == b"payload"
    assert blob.share_version == 0
    assert blob.namespace_version == NAMESPACE_VERSION_ZERO


def test_namespace_round_trip():
    assert new_blob(NS_B, b"x", 0).namespace() == NS_B
    assert new_blob(PARITY_SHARES_NAMESPACE, b"x", 0).namespace() == PARITY_SHARES_NAMESPACE


def test_validate_accepts_good_blob():
    blob = new_blob(NS_A, b"data", 0)
    blob.validate()
    assert blob.namespace() == NS_A


def test_validate_bad_namespace_id():
    blob = Blob(namespace_id=b"\x00" * 5, data=b"data")
    with pytest.raises(ValueError, match="namespace id must be 28 bytes"):
        blob.validate()


def test_validate_bad_share_version():
    blob = new_blob(NS_A, b"data", 0)
    blob.share_version = 256
    with pytest.raises(ValueError, match="share version"):
        blob.validate()


def test_validate_bad_namespace_version():
    blob = new_blob(NS_A, b"data", 0)
    blob.namespace_version = 256
    with pytest.raises(ValueError, match="namespace version"):
        blob.validate()


def test_validate_empty_data():
    blob = new_blob(NS_A, b"", 0)
    with pytest.raises(ValueError, match="blob data can not be empty"):
        blob.validate()


def test_sort_blobs_orders_by_namespace_and_is_stable():
    blobs = [
        new_blob(PARITY_SHARES_NAMESPACE, b"p", 0),
        new_blob(NS_B, b"b1", 0),
        new_blob(NS_A, b"a1", 0),
        new_blob(NS_B, b"b2", 0),
        new_blob(TX_NAMESPACE, b"t", 0),
        new_blob(NS_A, b"a2", 0),
    ]
    sort_blobs(blobs)
    assert [b.data for b in blobs] == [b"t", b"a1", b"a2", b"b1", b"b2", b"p"]
    keys = [bytes(b.namespace()) for b in blobs]
    assert keys == sorted(keys)