"""Namespaces: a one-byte version followed by a 28-byte identifier."""

from __future__ import annotations

import os
from dataclasses import dataclass

NAMESPACE_VERSION_SIZE = 1
NAMESPACE_ID_SIZE = 28
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

NAMESPACE_VERSION_ZERO = 0
NAMESPACE_VERSION_MAX = 0xFF

NAMESPACE_VERSION_ZERO_PREFIX_SIZE = 18
NAMESPACE_VERSION_ZERO_ID_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_PREFIX_SIZE
NAMESPACE_VERSION_ZERO_PREFIX = bytes(NAMESPACE_VERSION_ZERO_PREFIX_SIZE)

SUPPORTED_BLOB_NAMESPACE_VERSIONS = (NAMESPACE_VERSION_ZERO,)


@dataclass(frozen=True)
class Namespace:
    """A namespace version and identifier, ordered by their byte encoding."""

    version: int
    id: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", bytes(self.id))

    def __bytes__(self) -> bytes:
        return bytes([self.version]) + self.id

    def to_bytes(self) -> bytes:
        """Return the version byte followed by the identifier."""
        return bytes(self)

    def is_reserved(self) -> bool:
        """Return True if the namespace is reserved for protocol use."""
        return self.is_primary_reserved() or self.is_secondary_reserved()

    def is_primary_reserved(self) -> bool:
        return self <= MAX_PRIMARY_RESERVED_NAMESPACE

    def is_secondary_reserved(self) -> bool:
        return self >= MIN_SECONDARY_RESERVED_NAMESPACE

    def is_parity_shares(self) -> bool:
        return bytes(self) == bytes(PARITY_SHARES_NAMESPACE)

    def is_tail_padding(self) -> bool:
        return bytes(self) == bytes(TAIL_PADDING_NAMESPACE)

    def is_primary_reserved_padding(self) -> bool:
        return bytes(self) == bytes(PRIMARY_RESERVED_PADDING_NAMESPACE)

    def is_tx(self) -> bool:
        return bytes(self) == bytes(TX_NAMESPACE)

    def is_pay_for_blob(self) -> bool:
        return bytes(self) == bytes(PAY_FOR_BLOB_NAMESPACE)

    def repeat(self, times: int) -> list[Namespace]:
        """Return a list holding `times` independent copies of this namespace."""
        return [Namespace(self.version, bytes(self.id)) for _ in range(times)]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return bytes(self) < bytes(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return bytes(self) <= bytes(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return bytes(self) > bytes(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return bytes(self) >= bytes(other)


def _validate_version_supported(version: int) -> None:
    if version not in (NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_MAX):
        raise ValueError(f"unsupported namespace version {version}")


def _validate_id(version: int, id: bytes) -> None:
    if len(id) != NAMESPACE_ID_SIZE:
        raise ValueError(
            f"unsupported namespace id length: id {list(id)} must be "
            f"{NAMESPACE_ID_SIZE} bytes but it was {len(id)} bytes"
        )
    if version == NAMESPACE_VERSION_ZERO and not id.startswith(NAMESPACE_VERSION_ZERO_PREFIX):
        raise ValueError(
            f"unsupported namespace id with version {version}. ID {list(id)} must start "
            f"with {len(NAMESPACE_VERSION_ZERO_PREFIX)} leading zeros"
        )


def new(version: int, id: bytes) -> Namespace:
    """Return a validated namespace; raise ValueError if it is not supported."""
    id = bytes(id)
    _validate_version_supported(version)
    _validate_id(version, id)
    return Namespace(version, id)


def _left_pad(b: bytes, size: int) -> bytes:
    if len(b) >= size:
        return bytes(b)
    return bytes(size - len(b)) + bytes(b)


def new_v0(sub_id: bytes) -> Namespace:
    """Return a version 0 namespace, left-padding `sub_id` to 10 bytes."""
    sub_id = bytes(sub_id)
    if len(sub_id) > NAMESPACE_VERSION_ZERO_ID_SIZE:
        raise ValueError(
            f"subID must be <= {NAMESPACE_VERSION_ZERO_ID_SIZE}, "
            f"but it was {len(sub_id)} bytes"
        )
    padded = _left_pad(sub_id, NAMESPACE_VERSION_ZERO_ID_SIZE)
    return new(NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_ZERO_PREFIX + padded)


def from_bytes(b: bytes) -> Namespace:
    """Parse a namespace from its 29-byte encoding."""
    b = bytes(b)
    if len(b) != NAMESPACE_SIZE:
        raise ValueError(f"invalid namespace length: {len(b)} must be {NAMESPACE_SIZE}")
    return new(b[0], b[1:])


def _primary_reserved_namespace(last_byte: int) -> Namespace:
    return Namespace(NAMESPACE_VERSION_ZERO, bytes(NAMESPACE_ID_SIZE - 1) + bytes([last_byte]))


def _secondary_reserved_namespace(last_byte: int) -> Namespace:
    return Namespace(
        NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + bytes([last_byte])
    )


TX_NAMESPACE = _primary_reserved_namespace(0x01)
INTERMEDIATE_STATE_ROOTS_NAMESPACE = _primary_reserved_namespace(0x02)
PAY_FOR_BLOB_NAMESPACE = _primary_reserved_namespace(0x04)
PRIMARY_RESERVED_PADDING_NAMESPACE = _primary_reserved_namespace(0xFF)
MAX_PRIMARY_RESERVED_NAMESPACE = _primary_reserved_namespace(0xFF)
MIN_SECONDARY_RESERVED_NAMESPACE = _secondary_reserved_namespace(0x00)
TAIL_PADDING_NAMESPACE = _secondary_reserved_namespace(0xFE)
PARITY_SHARES_NAMESPACE = _secondary_reserved_namespace(0xFF)


def random_blob_namespace_id() -> bytes:
    """Return 10 random bytes usable as a version 0 sub-identifier."""
    return os.urandom(NAMESPACE_VERSION_ZERO_ID_SIZE)


def _is_blob_namespace(ns: Namespace) -> bool:
    return not ns.is_reserved() and ns.version in SUPPORTED_BLOB_NAMESPACE_VERSIONS


def random_blob_namespace() -> Namespace:
    """Return a random namespace that a user may choose for a blob."""
    while True:
        ns = new_v0(random_blob_namespace_id())
        if _is_blob_namespace(ns):
            return ns


def random_version_zero_id() -> bytes:
    """Return a random 28-byte version 0 identifier including its zero prefix."""
    return NAMESPACE_VERSION_ZERO_PREFIX + os.urandom(NAMESPACE_VERSION_ZERO_ID_SIZE)


def random_namespace() -> Namespace:
    """Return a random version 0 namespace."""
    while True:
        try:
            return new(NAMESPACE_VERSION_ZERO, random_version_zero_id())
        except ValueError:
            continue