"""Regret simulation harness driving :class:`ucbband.UCB1`."""
from .envs import BernoulliBandit, GaussianBandit, build_env
from .runner import run, run_with_timestamp, simulate, simulate_concurrent

__all__ = [
    "BernoulliBandit",
    "GaussianBandit",
    "build_env",
    "run",
    "run_with_timestamp",
    "simulate",
    "simulate_concurrent",
]
