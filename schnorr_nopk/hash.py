"""
BIP-340 tagged hashing for the Schnorr challenge.

    H_tag(x) = SHA-256( SHA-256(tag) ‖ SHA-256(tag) ‖ x )

The verifier itself takes the challenge as an already-reduced scalar
``msg_hash``; this module is how a caller derives it from a message:

    e = int( H_BIP0340/challenge( bytes(r) ‖ bytes(P.x) ‖ m ) ) mod n
"""

from __future__ import annotations

import hashlib

from .curve import ORDER, SCALAR_BYTES, Point
from .field import is_in_base_field_range

_TAG_CHALLENGE = b"BIP0340/challenge"


def _tagged_hasher(tag: bytes) -> hashlib._Hash:
    """Return a SHA-256 context pre-loaded with the BIP-340 tag prefix."""
    tag_hash = hashlib.sha256(tag).digest()
    h = hashlib.sha256()
    h.update(tag_hash)
    h.update(tag_hash)
    return h


def tagged_hash(tag: bytes, data: bytes) -> bytes:
    h = _tagged_hasher(tag)
    h.update(data)
    return h.digest()


def challenge(r: int, pk: Point, message: bytes) -> int:
    """
    Schnorr challenge  e = H(r, P, m) mod n.

    Raises ``ValueError`` if *r* is outside the base field or *pk* is the
    point at infinity.
    """
    if not is_in_base_field_range(r):
        raise ValueError("r outside the base field")
    data = (
        r.to_bytes(SCALAR_BYTES, "big")
        + pk.x.to_bytes(SCALAR_BYTES, "big")
        + message
    )
    return int.from_bytes(tagged_hash(_TAG_CHALLENGE, data), "big") % ORDER
