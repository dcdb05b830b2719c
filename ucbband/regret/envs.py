from __future__ import annotations

import math
from typing import List

import numpy as np

from ..config import EnvConfig


class BernoulliBandit:
    def __init__(self, means, seed=None):
        self.means = np.array(means, dtype=float)
        self.K = len(self.means)
        self.rng = np.random.default_rng(seed)

    def pull(self, a: int) -> float:
        return float(self.rng.random() < self.means[a])

    def expected_reward(self, a: int) -> float:
        return float(self.means[a])


class GaussianBandit:
    """Gaussian arms; draws are clipped at zero so every pull is a valid reward."""

    def __init__(self, mus, sigma=0.1, seed=None):
        self.mus = np.array(mus, dtype=float)
        self.sigma = float(sigma)
        self.K = len(self.mus)
        self.rng = np.random.default_rng(seed)

    def pull(self, a: int) -> float:
        return max(0.0, float(self.rng.normal(self.mus[a], self.sigma)))

    def expected_reward(self, a: int) -> float:
        """Mean of ``max(0, N(mu, sigma))``: ``mu * Phi(z) + sigma * phi(z)`` with ``z = mu / sigma``."""
        mu = float(self.mus[a])
        z = mu / self.sigma
        cdf = 0.5 * (1.0 + math.erf(z / math.sqrt(2.0)))
        pdf = math.exp(-0.5 * z * z) / math.sqrt(2.0 * math.pi)
        return mu * cdf + self.sigma * pdf


def arm_means(env) -> List[float]:
    return [env.expected_reward(a) for a in range(env.K)]


def build_env(cfg: EnvConfig, seed: int):
    if cfg.type == "bernoulli":
        return BernoulliBandit(cfg.means, seed=seed)
    if cfg.type == "gaussian":
        return GaussianBandit(cfg.means, sigma=cfg.sigma, seed=seed)
    raise ValueError(f"Unsupported env type: {cfg.type}")
