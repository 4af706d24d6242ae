"""Exceptions raised by ``schnorr_nopk``."""

from __future__ import annotations

from typing import Sequence


class ContractViolation(AssertionError):
    """A caller broke an operation's documented precondition."""


class SamplingError(RuntimeError):
    """Rejection sampling exhausted its attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"no even-y nonce found after {attempts} attempts")
        self.attempts = attempts


class InvalidSignature(ValueError):
    """A signature failed verification."""

    def __init__(self, failed_checks: Sequence[str]) -> None:
        super().__init__(
            "signature is invalid (failed: " + ", ".join(failed_checks) + ")"
        )
        self.failed_checks = tuple(failed_checks)
