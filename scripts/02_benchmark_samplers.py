import argparse
import logging
import time

import numpy as np

from zipfsampler import RejectionInversionZipf, TableZipf

logger = logging.getLogger(__name__)


def time_sampler(sampler_cls, n: int, s: float, q: float, n_draws: int, seed: int):
    """Return (construction seconds, seconds per scalar draw, seconds per batched draw)."""
    start = time.perf_counter()
    sampler = sampler_cls(n, s, q)
    build = time.perf_counter() - start

    rng = np.random.default_rng(seed)
    start = time.perf_counter()
    for _ in range(n_draws):
        sampler.draw(rng)
    scalar = (time.perf_counter() - start) / n_draws

    rng = np.random.default_rng(seed)
    start = time.perf_counter()
    sampler.sample(rng, n_draws)
    batched = (time.perf_counter() - start) / n_draws

    return build, scalar, batched


def main():
    parser = argparse.ArgumentParser(description="Compare rejection-inversion and table samplers")
    parser.add_argument("--n", type=int, nargs="+", default=[30, 300, 1000, 100_000])
    parser.add_argument("--s", type=float, default=1.0)
    parser.add_argument("--q", type=float, default=0.0)
    parser.add_argument("--n-draws", type=int, default=20_000)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    logger.info(f"{'sampler':<24}{'n':>10}{'build [ms]':>14}{'draw [us]':>12}{'batch [us]':>12}")
    for n in args.n:
        for sampler_cls in (RejectionInversionZipf, TableZipf):
            build, scalar, batched = time_sampler(
                sampler_cls, n, args.s, args.q, args.n_draws, args.seed
            )
            logger.info(
                f"{sampler_cls.__name__:<24}{n:>10}{build * 1e3:>14.3f}"
                f"{scalar * 1e6:>12.3f}{batched * 1e6:>12.3f}"
            )


if __name__ == "__main__":
    main()
