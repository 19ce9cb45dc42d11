"""Chaining of Merkle proof operators across nested trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from squarekit.merkle.key_path import key_path_to_keys
from squarekit.merkle.proof import ProofError


class ProofOperator(ABC):
    """One layer of a chained proof: turns leaf values into that tree's root."""

    @abstractmethod
    def run(self, args: Sequence[bytes]) -> list[bytes]:
        """Return the Merkle root(s) computed from `args`."""

    @abstractmethod
    def get_key(self) -> bytes:
        """Return the key this layer proves, or empty bytes if it has none."""


@dataclass
class ProofOp:
    """A proof operator in generic, encoded form."""

    type: str
    key: bytes = b""
    data: bytes = b""


OpDecoder = Callable[[ProofOp], ProofOperator]


def _text(key: bytes) -> str:
    return bytes(key).decode("utf-8", "replace")


class ProofOperators(list):
    """Operators applied in order; the final output is checked against a root."""

    def verify_value(self, root: bytes | None, keypath: str, value: bytes) -> None:
        """Verify a single value under `keypath`; raise ValueError if it fails."""
        self.verify(root, keypath, [value])

    def verify(self, root: bytes | None, keypath: str, args: Sequence[bytes]) -> None:
        """Run the operators over `args` and check the keys and the final root."""
        keys = key_path_to_keys(keypath)
        remaining = self._run(root, keys, args)
        if remaining:
            raise ProofError("keypath not consumed all")

    def verify_from_keys(
        self, root: bytes | None, keys: Sequence[bytes], args: Sequence[bytes]
    ) -> None:
        """Like verify, but with the keys given directly instead of a key path."""
        remaining = self._run(root, list(keys), args)
        if remaining:
            raise ProofError(f"keypath not consumed all: {_text(b'/'.join(remaining))}")

    def _run(
        self, root: bytes | None, keys: list[bytes], args: Sequence[bytes]
    ) -> list[bytes]:
        keys = [bytes(k) for k in keys]
        values = list(args)
        for i, op in enumerate(self):
            key = op.get_key()
            if key:
                if not keys:
                    raise ProofError(
                        "key path has insufficient # of parts: "
                        f"expected no more keys but got {_text(key)}"
                    )
                last = keys[-1]
                if last != bytes(key):
                    raise ProofError(
                        f"key mismatch on operation #{i}: "
                        f"expected {_text(last)} but got {_text(key)}"
                    )
                keys.pop()
            values = op.run(values)
        if not values:
            raise ProofError("no computed root to compare against")
        if root is None or bytes(root) != bytes(values[0]):
            expected = bytes(root or b"").hex().upper()
            raise ProofError(
                f"calculated root hash is invalid: expected {expected} "
                f"but got {bytes(values[0]).hex().upper()}"
            )
        return keys


class ProofRuntime:
    """Decodes encoded proof operators by type and verifies them."""

    def __init__(self) -> None:
        self._decoders: dict[str, OpDecoder] = {}

    def register_op_decoder(self, typ: str, dec: OpDecoder) -> None:
        """Register the decoder for operators of type `typ`."""
        if typ in self._decoders:
            raise ValueError(f"already registered for type {typ}")
        self._decoders[typ] = dec

    def decode(self, pop: ProofOp | None) -> ProofOperator:
        """Decode one encoded operator."""
        if pop is None:
            raise ProofError("nil ProofOp")
        decoder = self._decoders.get(pop.type)
        if decoder is None:
            raise ProofError(f"unrecognized proof type {pop.type}")
        return decoder(pop)

    def decode_proof(self, ops: Iterable[ProofOp]) -> ProofOperators:
        """Decode every operator of a proof, in order."""
        operators = ProofOperators()
        for pop in ops:
            try:
                operators.append(self.decode(pop))
            except ValueError as err:
                raise ProofError(f"decoding a proof operator: {err}") from err
        return operators

    def verify_value(
        self, proof: Iterable[ProofOp], root: bytes | None, keypath: str, value: bytes
    ) -> None:
        self.verify(proof, root, keypath, [value])

    def verify_value_from_keys(
        self,
        proof: Iterable[ProofOp],
        root: bytes | None,
        keys: Sequence[bytes],
        value: bytes,
    ) -> None:
        self.verify_from_keys(proof, root, keys, [value])

    def verify_absence(
        self, proof: Iterable[ProofOp], root: bytes | None, keypath: str
    ) -> None:
        self.verify(proof, root, keypath, [])

    def verify(
        self,
        proof: Iterable[ProofOp],
        root: bytes | None,
        keypath: str,
        args: Sequence[bytes],
    ) -> None:
        """Decode `proof` and verify it against `root` along `keypath`."""
        self._decode_for_verify(proof).verify(root, keypath, args)

    def verify_from_keys(
        self,
        proof: Iterable[ProofOp],
        root: bytes | None,
        keys: Sequence[bytes],
        args: Sequence[bytes],
    ) -> None:
        """Decode `proof` and verify it against `root` with the given keys."""
        self._decode_for_verify(proof).verify_from_keys(root, keys, args)

    def _decode_for_verify(self, proof: Iterable[ProofOp]) -> ProofOperators:
        try:
            return self.decode_proof(proof)
        except ValueError as err:
            raise ProofError(f"decoding proof: {err}") from err