"""Thread-safe UCB1 estimator.

Keeps per-arm pull counts and running mean rewards. Selection plays every
arm once in index order, then maximizes

    score_i = mean_i + sqrt(2 ln(total) / n_i)

with the *last* maximal index winning exact ties. Updates take the exclusive
side of a reader/writer lock; selection and the getters share the read side.
"""
from __future__ import annotations

import logging
import math
import operator
from typing import List, Sequence

import numpy as np

from .errors import BanditError, BanditStateError, ErrorKind
from .rwlock import RWLock

logger = logging.getLogger(__name__)


class UCB1:
    """Upper confidence bound estimator over a fixed number of arms."""

    def __init__(self, n_arms: int) -> None:
        self._lock = RWLock()
        self._counts = np.zeros(0, dtype=np.int64)
        self._rewards = np.zeros(0, dtype=np.float64)
        self.init(n_arms)

    @classmethod
    def from_stats(cls, counts: Sequence[int], rewards: Sequence[float]) -> "UCB1":
        """Seed an estimator with existing statistics.

        Only the shapes are checked (both flat, same length); the caller owns
        whatever values it passes in.
        """
        counts_arr = np.array(counts, dtype=np.int64)
        rewards_arr = np.array(rewards, dtype=np.float64)
        if counts_arr.ndim != 1 or rewards_arr.ndim != 1:
            raise BanditError(
                ErrorKind.INVALID_LENGTH,
                f"counts and rewards must be flat sequences, got shapes {counts_arr.shape} and {rewards_arr.shape}",
            )
        if counts_arr.size != rewards_arr.size:
            raise BanditError(
                ErrorKind.INVALID_LENGTH,
                f"counts and rewards differ in length ({counts_arr.size} != {rewards_arr.size})",
            )
        bandit = cls.__new__(cls)
        bandit._lock = RWLock()
        bandit._counts = counts_arr
        bandit._rewards = rewards_arr
        logger.debug("UCB1 seeded with %d arms (total pulls %d)", bandit._counts.size, int(bandit._counts.sum()))
        return bandit

    def init(self, n_arms: int) -> None:
        """Reset to ``n_arms`` untouched arms, discarding prior statistics."""
        with self._lock.write():
            if n_arms < 1:
                raise BanditError(ErrorKind.INVALID_ARM_COUNT, f"n_arms must be >= 1, got {n_arms}")
            self._counts = np.zeros(int(n_arms), dtype=np.int64)
            self._rewards = np.zeros(int(n_arms), dtype=np.float64)
        logger.debug("UCB1 reset to %d arms", n_arms)

    @property
    def n_arms(self) -> int:
        with self._lock.read():
            return int(self._counts.size)

    def select_arm(self, probability: float = 0.0) -> int:
        """Return the arm to play next.

        ``probability`` is part of the shared bandit call shape and is not
        read by UCB1.
        """
        with self._lock.read():
            counts = self._counts
            if counts.size == 0:
                raise BanditStateError("cannot select from an estimator with no arms")

            unplayed = np.flatnonzero(counts == 0)
            if unplayed.size:
                return int(unplayed[0])

            if np.any(counts < 1):
                raise BanditStateError(f"non-positive pull count reached scoring: {counts.tolist()}")
            total = int(counts.sum())
            bonus = np.sqrt(2.0 * math.log(total) / counts)
            scores = self._rewards + bonus
            # argmax keeps the first maximum; scanning reversed keeps the last
            return int(scores.size - 1 - np.argmax(scores[::-1]))

    def update(self, chosen_arm: int, reward: float) -> None:
        """Fold one observed ``reward`` into the running mean of ``chosen_arm``."""
        try:
            chosen_arm = operator.index(chosen_arm)
        except TypeError:
            raise BanditError(
                ErrorKind.INDEX_OUT_OF_RANGE,
                f"arm index must be an integer, got {type(chosen_arm).__name__} {chosen_arm!r}",
            ) from None
        with self._lock.write():
            n_arms = self._counts.size
            if chosen_arm < 0 or chosen_arm >= n_arms:
                raise BanditError(
                    ErrorKind.INDEX_OUT_OF_RANGE,
                    f"arm {chosen_arm} outside [0, {n_arms})",
                )
            if not reward >= 0:
                raise BanditError(ErrorKind.INVALID_REWARD, f"reward must be non-negative, got {reward}")

            self._counts[chosen_arm] += 1
            n = float(self._counts[chosen_arm])
            old = float(self._rewards[chosen_arm])
            self._rewards[chosen_arm] = (old * (n - 1) + float(reward)) / n

    def get_counts(self) -> List[int]:
        with self._lock.read():
            return self._counts.tolist()

    def get_rewards(self) -> List[float]:
        with self._lock.read():
            return self._rewards.tolist()

    def __repr__(self) -> str:
        with self._lock.read():
            return f"UCB1(counts={self._counts.tolist()}, rewards={np.round(self._rewards, 4).tolist()})"
