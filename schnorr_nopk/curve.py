"""
Elliptic curve arithmetic on secp256k1 via libsecp256k1.

Group operations (scalar multiplication, point addition) are delegated
to ``coincurve``, which wraps Bitcoin Core's libsecp256k1.  Points can
only be built through libsecp256k1's parser, so every affine ``Point``
is known to lie on the curve.

Install
-------
    pip install coincurve>=18.0.0

References
----------
- SEC 2 v2 §2.4.1  secp256k1 domain parameters
- BIP-340            Schnorr signature specification for Bitcoin
"""

from __future__ import annotations

import random
import secrets
from typing import Optional, Tuple, Union

from coincurve import PrivateKey as _SK, PublicKey as _PK

from .errors import ContractViolation

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SCALAR_BYTES = 32


# ── Scalar  (Z_n arithmetic, pure Python) ───────────────────────────────
class Scalar:
    """Element of the scalar field  Z_n  where *n* = ``ORDER``."""

    __slots__ = ("_v",)

    def __init__(self, value: int) -> None:
        self._v = value % ORDER

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Scalar:
        """
        Uniform in [1, n-1] via rejection sampling.

        *rng* makes the draw reproducible; without it the OS CSPRNG is
        used.
        """
        while True:
            if rng is None:
                c = int.from_bytes(secrets.token_bytes(SCALAR_BYTES), "big")
            else:
                c = rng.getrandbits(8 * SCALAR_BYTES)
            if 0 < c < ORDER:
                return cls(c)

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar(self._v + o._v)

    def __mul__(self, o: Scalar) -> Scalar:
        if isinstance(o, Scalar):
            return Scalar(self._v * o._v)
        return NotImplemented

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            return self._v == o._v
        if isinstance(o, int):
            return self._v == o % ORDER
        return False

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"Scalar(0x{h[2:10]}…)" if len(h) > 14 else f"Scalar({h})"


ScalarLike = Union[int, Scalar]


def _as_scalar(value: ScalarLike) -> Scalar:
    return value if isinstance(value, Scalar) else Scalar(value)


# ── Point  (secp256k1 group element via libsecp256k1) ───────────────────
class Point:
    """
    Point on secp256k1, never mutated after construction.

    The identity (point at infinity) is represented by a flag rather than
    a ``coincurve.PublicKey``, which cannot hold it.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        self._pk: Optional[_PK] = pk
        self._inf: bool = infinity

    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK(b"\x00" * 31 + b"\x01").public_key)

    @classmethod
    def identity(cls) -> Point:
        """Point at infinity, the additive identity."""
        return cls(infinity=True)

    @classmethod
    def from_scalar(cls, s: Scalar) -> Point:
        """Compute *s · G* with libsecp256k1's generator tables."""
        if s.is_zero():
            return cls.identity()
        return cls(pk=_SK(s.to_bytes()).public_key)

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> Point:
        """
        Build an affine point from integer coordinates.

        Raises ``ValueError`` if *(x, y)* is not on secp256k1.
        """
        if not (0 <= x < FIELD_PRIME and 0 <= y < FIELD_PRIME):
            raise ValueError("coordinate outside the base field")
        return cls(pk=_PK.from_point(x, y))

    @property
    def x(self) -> int:
        if self._inf:
            raise ValueError("the point at infinity has no affine x")
        return self._pk.point()[0]  # type: ignore[union-attr]

    @property
    def y(self) -> int:
        if self._inf:
            raise ValueError("the point at infinity has no affine y")
        return self._pk.point()[1]  # type: ignore[union-attr]

    def coordinates(self) -> Tuple[int, int]:
        if self._inf:
            raise ValueError("the point at infinity has no affine coordinates")
        return self._pk.point()  # type: ignore[union-attr]

    def is_inf(self) -> bool:
        return self._inf

    # group operations -------------------------------------------------------
    def _smul(self, s: Scalar) -> Point:
        """Scalar multiplication  s · self  (C speed)."""
        if self._inf or s.is_zero():
            return Point.identity()
        copy = _PK(self._pk.format())  # type: ignore[union-attr]
        return Point(pk=copy.multiply(s.to_bytes()))

    def __neg__(self) -> Point:
        if self._inf:
            return self
        raw = bytearray(self._pk.format(compressed=True))  # type: ignore
        raw[0] ^= 0x01            # 0x02 ↔ 0x03 flip parity
        return Point(pk=_PK(bytes(raw)))

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf:
            return o
        if o._inf:
            return self
        # P + (-P) = O
        if self._pk.format() == (-o)._pk.format():  # type: ignore
            return Point.identity()
        return Point(pk=_PK.combine_keys(
            [self._pk, o._pk]))  # type: ignore[list-item]

    def __sub__(self, o: Point) -> Point:
        return self + (-o)

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf and o._inf:
            return True
        if self._inf or o._inf:
            return False
        return self._pk.format() == o._pk.format()  # type: ignore

    def __hash__(self) -> int:
        if self._inf:
            return hash(None)
        return hash(self._pk.format())  # type: ignore[union-attr]

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self.x:064x})"[:42] + "…)"


G = Point.generator()


# ── adapter operations used by the verifier ─────────────────────────────

def fixed_base_multiply(generator: Point, scalar: ScalarLike) -> Point:
    """
    ``scalar · generator`` for a known base point.

    The scalar is reduced mod *n*.  Multiples of the standard generator
    go through libsecp256k1's precomputed-table path.
    """
    s = _as_scalar(scalar)
    if generator == G:
        return Point.from_scalar(s)
    return generator._smul(s)


def variable_base_multiply(point: Point, scalar: ScalarLike) -> Point:
    """``scalar · point`` for a runtime point; ``0 · P`` and ``k · O`` give O."""
    return point._smul(_as_scalar(scalar))


def points_equal(a: Point, b: Point) -> bool:
    return a == b


def x_coordinates_differ(a: Point, b: Point) -> bool:
    """True iff both points are affine and their x-coordinates differ."""
    if a.is_inf() or b.is_inf():
        return False
    return a.x != b.x


def subtract_assume_unequal(a: Point, b: Point) -> Point:
    """
    Compute *a − b* for affine points with distinct x-coordinates.

    Raises ``ContractViolation`` when the precondition does not hold;
    callers must test ``x_coordinates_differ`` first.
    """
    if not x_coordinates_differ(a, b):
        raise ContractViolation(
            "subtract_assume_unequal needs affine points with distinct x"
        )
    return a - b
