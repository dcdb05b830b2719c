from __future__ import annotations

import json
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from ..config import RegretConfig
from ..ucb import UCB1
from .envs import arm_means, build_env
from .metrics import pseudo_regret, sqrt_t_fit
from .plots import plot_regret_band

logger = logging.getLogger(__name__)

Z_95 = 1.96


def simulate(cfg: RegretConfig, seed: int) -> Tuple[np.ndarray, UCB1]:
    """Run one select -> pull -> update loop over the horizon."""
    env = build_env(cfg.env, seed=seed)
    bandit = UCB1(env.K)

    actions: List[int] = []
    for _ in range(cfg.env.T):
        a = bandit.select_arm()
        bandit.update(a, env.pull(a))
        actions.append(a)

    return pseudo_regret(actions, arm_means(env)), bandit


def simulate_concurrent(cfg: RegretConfig, seed: int) -> Tuple[np.ndarray, UCB1]:
    """Split the horizon across ``cfg.workers`` threads sharing one estimator.

    Each worker draws from its own environment stream. Actions are recorded
    in the order their updates landed, so the regret curve reflects the
    interleaving the estimator actually saw.
    """
    workers = cfg.workers
    envs = [build_env(cfg.env, seed=int(s.generate_state(1)[0])) for s in np.random.SeedSequence(seed).spawn(workers)]
    bandit = UCB1(envs[0].K)
    share, extra = divmod(cfg.env.T, workers)

    actions: List[int] = []
    record_lock = threading.Lock()

    def _worker(idx: int) -> int:
        env = envs[idx]
        pulls = share + (idx < extra)
        for _ in range(pulls):
            a = bandit.select_arm()
            r = env.pull(a)
            with record_lock:
                bandit.update(a, r)
                actions.append(a)
        return pulls

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ucb-worker") as pool:
        done = sum(pool.map(_worker, range(workers)))

    logger.debug("concurrent seed %d: %d pulls across %d workers", seed, done, workers)
    return pseudo_regret(actions, arm_means(envs[0])), bandit


def confidence_band(regrets: np.ndarray) -> Dict[str, np.ndarray]:
    """Per-step seed mean with a normal 95% interval (zero width for a single seed)."""
    n_seeds = regrets.shape[0]
    mean = regrets.mean(axis=0)
    sem = regrets.std(axis=0, ddof=1) / np.sqrt(n_seeds) if n_seeds > 1 else np.zeros_like(mean)
    return {
        "t": np.arange(1, regrets.shape[1] + 1),
        "mean": mean,
        "lo": mean - Z_95 * sem,
        "hi": mean + Z_95 * sem,
    }


def run(
    cfg: RegretConfig,
    outdir: str,
    make_plots: bool = True,
    save_csv: bool = True,
) -> Dict:
    sim = simulate if cfg.workers == 1 else simulate_concurrent
    os.makedirs(outdir, exist_ok=True)

    curves, per_seed_counts = [], []
    for seed in cfg.seeds:
        regret, bandit = sim(cfg, seed)
        curves.append(regret)
        per_seed_counts.append(bandit.get_counts())
        logger.info("seed %d: R(T)=%.2f counts=%s", seed, float(regret[-1]), per_seed_counts[-1])

    band = confidence_band(np.vstack(curves))
    counts = np.sum(per_seed_counts, axis=0)

    if save_csv:
        csv_path = os.path.join(outdir, "regret.csv")
        pd.DataFrame(band).to_csv(csv_path, index=False)
        logger.info("[SAVE] curves -> %s", csv_path)
    if make_plots:
        png_path = os.path.join(outdir, "regret.png")
        plot_regret_band(
            band,
            png_path,
            seeds=len(cfg.seeds),
            logx=cfg.plot.logx,
            show_ref_sqrt=cfg.plot.show_ref_sqrt,
        )
        logger.info("[SAVE] figure -> %s", png_path)

    fit = sqrt_t_fit(band["mean"])
    summary = {
        "final_regret": float(band["mean"][-1]),
        "slope": fit.slope,
        "correlation": fit.correlation,
        "counts": [int(c) for c in counts],
        "pulls": int(counts.sum()),
    }
    with open(os.path.join(outdir, "summary.json"), "w", encoding="utf-8") as f:
        json.dump({"summary": summary, "config": cfg.model_dump()}, f, indent=2)

    return summary


def run_with_timestamp(cfg: RegretConfig, base_outdir: str, make_plots: bool = True, save_csv: bool = True) -> Dict:
    """Like :func:`run`, writing into a fresh ``<base_outdir>/<UTC stamp>`` directory."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return run(cfg, outdir=os.path.join(base_outdir, stamp), make_plots=make_plots, save_csv=save_csv)
