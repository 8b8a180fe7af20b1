import dataclasses
import logging
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from ..sampling import ZipfParams, make_sampler
from ..sampling.registry import resolve_method
from .reporting import fit_report, save_fit_report, save_run_metadata
from .writer import NPZWriter, WorkloadWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorkloadSettings:
    n: int = 1000
    s: float = 1.0
    q: float = 0.0
    method: str = "auto"  # "auto", "rejection" or "table"

    n_draws: int = 100_000
    n_repeats: int = 1
    chunk_size: int = 65_536
    master_seed: int = 42
    output_dir: Path = Path("workloads")

    def validate(self) -> "WorkloadSettings":
        ZipfParams(self.n, float(self.s), float(self.q)).validate()
        if self.n_draws < 0:
            raise ValueError("n_draws must be >= 0")
        if self.n_repeats < 1:
            raise ValueError("n_repeats must be >= 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        return self

    @property
    def params(self) -> ZipfParams:
        return ZipfParams(self.n, float(self.s), float(self.q))


def generate_keys(sampler, n_draws: int, chunk_size: int, seed_seq: np.random.SeedSequence):
    """Draw ``n_draws`` keys, one child generator per chunk."""
    n_chunks = -(-n_draws // chunk_size)
    keys = np.empty(n_draws, dtype=np.int64)
    for chunk_idx, chunk_ss in enumerate(seed_seq.spawn(n_chunks)):
        start = chunk_idx * chunk_size
        stop = min(start + chunk_size, n_draws)
        rng = np.random.default_rng(chunk_ss)
        keys[start:stop] = sampler.sample(rng, stop - start)
    return keys


def run_workload(
    settings: WorkloadSettings,
    *,
    writer: WorkloadWriter | None = None,
) -> list[dict]:
    pipeline_start_time = time.perf_counter()
    total_draw_time = 0.0

    settings.validate()
    method = resolve_method(settings.n, settings.method)
    writer = writer or NPZWriter(settings.output_dir, n_repeats=settings.n_repeats)

    settings.output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Workloads will be saved under: {settings.output_dir}")

    build_start = time.perf_counter()
    sampler = make_sampler(settings.n, settings.s, settings.q, method=method)
    logger.info(f"Built {sampler!r} in {time.perf_counter() - build_start:.4f}s")

    master_ss = np.random.SeedSequence(settings.master_seed)
    repeats: list[dict] = []
    for rep_i, rep_ss in enumerate(master_ss.spawn(settings.n_repeats)):
        draw_start = time.perf_counter()
        keys = generate_keys(sampler, settings.n_draws, settings.chunk_size, rep_ss)
        draw_duration = time.perf_counter() - draw_start
        total_draw_time += draw_duration

        repeats.append({"seed": int(rep_ss.generate_state(1)[0]), "keys": keys})
        logger.info(f"Drew {settings.n_draws} keys for rep #{rep_i} in {draw_duration:.4f}s")

    saved = writer.save_workload(method=method, params=sampler.params, repeats=repeats)
    if saved is not None:
        logger.info(f"Saved workload to {saved}")

    rows = fit_report(sampler.params, repeats)
    for row in rows:
        if row["p_value"] < 1e-3:
            logger.warning(
                f"Rep #{row['repeat']} deviates from the expected law (p={row['p_value']:.2e})"
            )
    save_fit_report(rows, settings.output_dir)

    pipeline_duration = time.perf_counter() - pipeline_start_time
    logger.info(f"Pipeline completed in {pipeline_duration:.2f}s")
    logger.info(f"Total time spent drawing: {total_draw_time:.2f}s")

    save_run_metadata(
        dataclasses.asdict(settings),
        pipeline_duration,
        total_draw_time,
        settings.output_dir,
    )
    return repeats
