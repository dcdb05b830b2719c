"""Error taxonomy for the UCB1 estimator.

Every failure raised for bad caller input carries one of four fixed kinds so
hosts can branch on ``err.kind`` instead of parsing messages.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARM_COUNT = "invalid_arm_count"
    INVALID_LENGTH = "invalid_length"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INVALID_REWARD = "invalid_reward"


class BanditError(ValueError):
    """Caller misuse of the estimator. State is left untouched."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.args[0]}"


class BanditStateError(RuntimeError):
    """Internal invariant violated (e.g. a seeded zero count reached scoring)."""
