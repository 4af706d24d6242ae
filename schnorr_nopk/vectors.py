"""
Signature instances that satisfy the even-y nonce convention by
construction, for exercising the verifier.

    sk ←$ Z_n,   P = sk·G
    k  ←$ Z_n    until  (k·G).y  is even
    r  = (k·G).x
    s  = k + sk·e   (mod n)

so that  s·G − e·P = k·G.

Nonce resampling terminates with probability 1 and each draw succeeds
with probability about 1/2; the loop is still capped by
*max_attempts* (default 256, failure probability about 2^-256).
Hitting the cap raises ``SamplingError``.  This is latency that varies
from call to call, never a hang.

Pass a seeded ``random.Random`` as *rng* for reproducible vectors.
Without one each call draws from the OS CSPRNG, so concurrent callers
share no state.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from .curve import G, Point, Scalar, ScalarLike, fixed_base_multiply
from .errors import SamplingError
from .field import is_even
from .hash import challenge
from .verify import SignatureInput

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 256


def _nonzero_scalar(
    value: Optional[ScalarLike],
    rng: Optional[random.Random],
    name: str,
) -> Scalar:
    if value is None:
        return Scalar.random(rng)
    v = value if isinstance(value, Scalar) else Scalar(value)
    if v.is_zero():
        raise ValueError(f"{name} must be non-zero mod n")
    return v


def even_y_nonce(
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Tuple[Scalar, Point]:
    """
    Draw a nonce *k* whose commitment  R = k·G  has even y.

    Returns ``(k, R)``.  Raises ``SamplingError`` after *max_attempts*
    odd draws and ``ValueError`` if *max_attempts* < 1.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be ≥ 1")
    for attempt in range(1, max_attempts + 1):
        k = Scalar.random(rng)
        R = fixed_base_multiply(G, k)
        if is_even(R.y):
            logger.debug("even-y nonce found after %d attempt(s)", attempt)
            return k, R
    raise SamplingError(max_attempts)


def random_schnorr_input(
    rng: Optional[random.Random] = None,
    *,
    secret_key: Optional[ScalarLike] = None,
    msg_hash: Optional[ScalarLike] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SignatureInput:
    """
    Produce a valid ``SignatureInput``.

    Parameters
    ----------
    rng : random.Random, optional
        Randomness source; ``None`` uses ``secrets``.
    secret_key : int or Scalar, optional
        Fixed *sk* instead of a random one (must be non-zero mod n).
    msg_hash : int or Scalar, optional
        Fixed challenge *e* instead of a random one (must be non-zero
        mod n).
    max_attempts : int
        Cap on nonce resampling.
    """
    sk = _nonzero_scalar(secret_key, rng, "secret key")
    pk = fixed_base_multiply(G, sk)
    e = _nonzero_scalar(msg_hash, rng, "msg_hash")

    k, R = even_y_nonce(rng, max_attempts)
    s = k + sk * e
    return SignatureInput(r=R.x, s=s.value, msg_hash=e.value, pk=pk)


def sign_message(
    secret_key: ScalarLike,
    message: bytes,
    rng: Optional[random.Random] = None,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SignatureInput:
    """
    Sign *message*, taking the BIP-340 challenge of  (r, P, m)  as *e*.

    Raises ``ValueError`` for a zero secret key.
    """
    sk = _nonzero_scalar(secret_key, rng, "secret key")
    pk = fixed_base_multiply(G, sk)
    k, R = even_y_nonce(rng, max_attempts)
    r = R.x
    e = Scalar(challenge(r, pk, message))
    s = k + sk * e
    return SignatureInput(r=r, s=s.value, msg_hash=e.value, pk=pk)
