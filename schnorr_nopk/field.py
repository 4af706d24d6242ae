"""
Range and parity predicates on field representatives.

Inputs are plain ``int`` canonical representatives rather than
``Scalar`` so that out-of-range values stay observable; a ``Scalar``
would already have reduced them mod *n*.  None of these raise on
out-of-range input: they answer ``False``.
"""

from __future__ import annotations

from .curve import FIELD_PRIME, ORDER


def is_in_base_field_range(x: int) -> bool:
    """True iff  0 ≤ x < p."""
    return 0 <= x < FIELD_PRIME


def is_soft_nonzero(scalar: int) -> bool:
    """
    True iff  0 < scalar < n.

    "Soft" because only the zero and overflow cases are rejected; it
    says nothing about malleability of an in-range value.
    """
    return 0 < scalar < ORDER


def is_even(field_element: int) -> bool:
    """Parity of the least non-negative residue of *field_element* mod p."""
    return (field_element % FIELD_PRIME) % 2 == 0
