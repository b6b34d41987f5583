"""Hashing capability used to derive asset keys.

The URL layer only needs ``hash(str) -> str``; anything with that method
can be injected. ``HashlibHasher`` is the stock adapter.
"""

import hashlib
from typing import Protocol, runtime_checkable

from plume.errors import ConfigurationError


@runtime_checkable
class Hasher(Protocol):
    """Deterministic string hash. Same input, same output."""

    def hash(self, value: str) -> str: ...


class HashlibHasher:
    """Lowercase hex digest of the UTF-8 input via :mod:`hashlib`.

    Usage::

        hasher = HashlibHasher("sha256", length=8)
        hasher.hash("jquery.app")  # e.g. "3f2a9c1d"
    """

    __slots__ = ("_algorithm", "_length")

    def __init__(self, algorithm: str = "sha1", *, length: int | None = None) -> None:
        # shake_* digests need an explicit length and are not supported
        if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
            msg = f"Unknown hash algorithm {algorithm!r}"
            raise ConfigurationError(msg)
        if length is not None and length <= 0:
            msg = f"length must be positive or None, got {length!r}"
            raise ConfigurationError(msg)
        try:
            hashlib.new(algorithm)
        except ValueError as exc:
            # Listed but refused by the backend (e.g. ripemd160 under OpenSSL 3)
            msg = f"Hash algorithm {algorithm!r} is not usable: {exc}"
            raise ConfigurationError(msg) from exc
        self._algorithm = algorithm
        self._length = length

    def hash(self, value: str) -> str:
        digest = hashlib.new(self._algorithm, value.encode("utf-8")).hexdigest()
        if self._length is not None:
            return digest[: self._length]
        return digest
