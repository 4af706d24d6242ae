"""
schnorr_nopk: Schnorr signature verification over secp256k1 without a
public-key check.

The verifier recovers the nonce point  R = s·G − e·P  and accepts iff

- r lies in the base field  (0 ≤ r < p),
- s and e are soft-nonzero scalars  (0 < · < n),
- s·G and e·P have distinct x-coordinates,
- R.y is even (BIP-340 convention),
- R.x == r.

The public key is taken as given: callers decide whether it is the key
they expect.

Quick start
-----------
::

    from schnorr_nopk import G, random_schnorr_input, verify

    sig = random_schnorr_input(secret_key=1, msg_hash=1)
    assert verify(G, sig.r, sig.s, 1)
    assert not verify(G, sig.r, sig.s + 1, 1)
"""

__version__ = "0.1.0"

# ── curve arithmetic ────────────────────────────────────────────────────
from .curve import (
    Scalar,
    Point,
    G,
    ORDER,
    FIELD_PRIME,
    fixed_base_multiply,
    variable_base_multiply,
    points_equal,
    x_coordinates_differ,
    subtract_assume_unequal,
)
from .field import is_in_base_field_range, is_soft_nonzero, is_even

# ── verification ────────────────────────────────────────────────────────
from .verify import (
    SignatureInput,
    verify,
    verify_input,
    require_valid,
    nonce_y_is_even,
    nonce_x_matches,
)

# ── test vectors ────────────────────────────────────────────────────────
from .vectors import (
    DEFAULT_MAX_ATTEMPTS,
    even_y_nonce,
    random_schnorr_input,
    sign_message,
)
from .hash import challenge, tagged_hash

# ── errors ──────────────────────────────────────────────────────────────
from .errors import ContractViolation, SamplingError, InvalidSignature

__all__ = [
    # version
    "__version__",
    # curve
    "Scalar", "Point", "G", "ORDER", "FIELD_PRIME",
    "fixed_base_multiply", "variable_base_multiply", "points_equal",
    "x_coordinates_differ", "subtract_assume_unequal",
    "is_in_base_field_range", "is_soft_nonzero", "is_even",
    # verification
    "SignatureInput", "verify", "verify_input", "require_valid",
    "nonce_y_is_even", "nonce_x_matches",
    # vectors
    "DEFAULT_MAX_ATTEMPTS", "even_y_nonce", "random_schnorr_input",
    "sign_message", "challenge", "tagged_hash",
    # errors
    "ContractViolation", "SamplingError", "InvalidSignature",
]
