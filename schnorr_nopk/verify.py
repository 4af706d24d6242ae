"""
Schnorr verification without a public-key check.

Given public key *P*, commitment *r*, response *s* and challenge *e*
(``msg_hash``), the signature is valid iff the recovered nonce point

    R = s·G − e·P

is affine with an even y-coordinate and  R.x == r.  The even-y
convention is the BIP-340 one: the signer resamples its nonce until
k·G has even y, so *R*'s sign never needs to be transmitted.

Every check is computed and the results are ANDed; the verifier never
raises on out-of-range *r*, *s* or *e*, it answers ``False``.

Trust boundary
--------------
*P* is not checked for being a registered or expected key.  It is a
``Point``, which can only be built from on-curve coordinates, so the
remaining caller obligation is that *P* is the intended key.  The
identity as *P* makes e·P the identity and verification fails on the
``x_neq`` check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .curve import (
    G,
    ORDER,
    Point,
    fixed_base_multiply,
    subtract_assume_unequal,
    variable_base_multiply,
    x_coordinates_differ,
)
from .errors import InvalidSignature
from .field import is_even, is_in_base_field_range, is_soft_nonzero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignatureInput:
    """The four verifier inputs  (r, s, e, P)."""

    r: int            # x-coordinate commitment, base field
    s: int            # response, scalar field
    msg_hash: int     # challenge e, scalar field
    pk: Point

    def verify(self) -> bool:
        return verify_input(self)


# ── named predicates ────────────────────────────────────────────────────

def nonce_y_is_even(R: Optional[Point]) -> bool:
    """Even-y canonicalisation of the recovered nonce point."""
    if R is None or R.is_inf():
        return False
    return is_even(R.y)


def nonce_x_matches(R: Optional[Point], r: int) -> bool:
    """
    R.x equals the commitment *r*.

    R.x must also be below *n*, the bound a scalar-field representative
    has to meet.
    """
    if R is None or R.is_inf():
        return False
    x = R.x
    return x < ORDER and x == r


def _checks(pk: Point, r: int, s: int, msg_hash: int) -> List[Tuple[str, bool]]:
    S = fixed_base_multiply(G, s)
    E = variable_base_multiply(pk, msg_hash)

    # sub_unequal is only defined for distinct x
    x_neq = x_coordinates_differ(S, E)
    R = subtract_assume_unequal(S, E) if x_neq else None

    return [
        ("r_valid", is_in_base_field_range(r)),
        ("s_valid", is_soft_nonzero(s)),
        ("e_valid", is_soft_nonzero(msg_hash)),
        ("x_neq", x_neq),
        ("y_even", nonce_y_is_even(R)),
        ("x_match", nonce_x_matches(R, r)),
    ]


def _failed(checks: List[Tuple[str, bool]]) -> List[str]:
    return [name for name, ok in checks if not ok]


def verify(pk: Point, r: int, s: int, msg_hash: int) -> bool:
    """
    Verify  (r, s)  on challenge *msg_hash* under public key *pk*.

    Parameters
    ----------
    pk : Point
        Public key *P*.
    r : int
        Must satisfy  0 ≤ r < p.
    s : int
        Must satisfy  0 < s < n.
    msg_hash : int
        Challenge *e*; must satisfy  0 < e < n.
    """
    checks = _checks(pk, r, s, msg_hash)
    failed = _failed(checks)
    if failed:
        logger.debug("schnorr verification failed: %s", ", ".join(failed))
    return not failed


def verify_input(sig: SignatureInput) -> bool:
    return verify(sig.pk, sig.r, sig.s, sig.msg_hash)


def require_valid(sig: SignatureInput) -> None:
    """
    Assert that *sig* verifies.

    Raises ``InvalidSignature`` carrying the names of the failed checks.
    """
    failed = _failed(_checks(sig.pk, sig.r, sig.s, sig.msg_hash))
    if failed:
        raise InvalidSignature(failed)
