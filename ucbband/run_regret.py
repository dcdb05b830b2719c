import argparse
import json
import logging

from .config import load_config
from .regret.runner import run_with_timestamp


def main(argv=None):
    ap = argparse.ArgumentParser(description="Simulate UCB1 pseudo-regret on a stationary bandit")
    ap.add_argument("--config", default="configs/regret.yaml")
    ap.add_argument("--outdir", default=None, help="Base output directory")
    ap.add_argument("--no-plots", action="store_true", help="Disable plotting")
    ap.add_argument("--no-csv", action="store_true", help="Skip writing regret.csv")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    cfg = load_config(args.config)
    base_outdir = args.outdir or cfg.outdir
    save_csv = cfg.save_csv and not args.no_csv

    result = run_with_timestamp(cfg, base_outdir, make_plots=not args.no_plots, save_csv=save_csv)
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
