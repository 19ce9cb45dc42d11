"""Key paths naming the keys of each layer of a chained Merkle proof.

Each key is written either URL-escaped or as upper-case hex prefixed with
``x:``.  A path starts with ``/``.  Both encodings decode to the same keys,
so the choice only affects readability and length.
"""

from __future__ import annotations

import binascii
import re
from dataclasses import dataclass
from enum import IntEnum
from urllib.parse import quote_from_bytes, unquote_to_bytes

# Characters left unescaped in a path segment besides letters, digits and "_.-~".
_PATH_SEGMENT_SAFE = "$&+:=@"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_HEX_PREFIX = "x:"


class KeyEncoding(IntEnum):
    """How a key is written inside a key path."""

    URL = 0
    HEX = 1


@dataclass(frozen=True)
class Key:
    """One key of a key path together with its encoding."""

    name: bytes
    enc: KeyEncoding


@dataclass(frozen=True)
class KeyPath:
    """An ordered, immutable sequence of encoded keys."""

    keys: tuple[Key, ...] = ()

    def append_key(self, key: bytes, enc: KeyEncoding) -> KeyPath:
        """Return a new path with `key` added at the end."""
        return KeyPath((*self.keys, Key(bytes(key), KeyEncoding(enc))))

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self):
        return iter(self.keys)

    def __str__(self) -> str:
        parts = []
        for key in self.keys:
            if key.enc is KeyEncoding.URL:
                parts.append("/" + quote_from_bytes(key.name, safe=_PATH_SEGMENT_SAFE))
            elif key.enc is KeyEncoding.HEX:
                parts.append("/" + _HEX_PREFIX + key.name.hex().upper())
            else:
                raise ValueError("unexpected key encoding type")
        return "".join(parts)


def _path_unescape(part: str) -> bytes:
    bad = _BAD_ESCAPE.search(part)
    if bad is not None:
        raise ValueError(f"invalid URL escape {part[bad.start():bad.start() + 3]!r}")
    return unquote_to_bytes(part)


def key_path_to_keys(path: str) -> list[bytes]:
    """Decode a key path into its keys; raise ValueError if it is malformed."""
    if not path or path[0] != "/":
        raise ValueError("key path string must start with a forward slash '/'")
    keys: list[bytes] = []
    for i, part in enumerate(path[1:].split("/")):
        if part.startswith(_HEX_PREFIX):
            try:
                keys.append(binascii.unhexlify(part[len(_HEX_PREFIX):].encode("ascii")))
            except ValueError as err:
                raise ValueError(f"decoding hex-encoded part #{i}: /{part}: {err}") from err
        else:
            try:
                keys.append(_path_unescape(part))
            except ValueError as err:
                raise ValueError(f"decoding url-encoded part #{i}: /{part}: {err}") from err
    return keys