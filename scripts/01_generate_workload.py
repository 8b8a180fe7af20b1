import argparse
import logging
from pathlib import Path

from zipfsampler.workload import WorkloadSettings, run_workload


def main():
    parser = argparse.ArgumentParser(description="Zipf-distributed key workload generation")

    # Distribution
    parser.add_argument("--n", type=int, default=1000, help="Support size, keys are in [1, n]")
    parser.add_argument("--s", type=float, default=1.0, help="Power-law exponent")
    parser.add_argument("--q", type=float, default=0.0, help="Hurwicz deformation (> -0.5)")
    parser.add_argument(
        "--method",
        choices=["auto", "rejection", "table"],
        default="auto",
        help="Sampler implementation",
    )

    # Output
    parser.add_argument(
        "--output-dir", type=Path, default=Path("workloads/zipf"), help="Output directory"
    )
    parser.add_argument("--seed", type=int, default=42, help="Master random seed")
    parser.add_argument("--n-draws", type=int, default=100_000, help="Keys per repetition")
    parser.add_argument("--n-repeats", type=int, default=1, help="Number of repetitions")
    parser.add_argument("--chunk-size", type=int, default=65_536)

    args = parser.parse_args()

    # Ensure output directory exists for logging
    args.output_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(args.output_dir / "generation.log"),
        ],
    )

    settings = WorkloadSettings(
        n=args.n,
        s=args.s,
        q=args.q,
        method=args.method,
        n_draws=args.n_draws,
        n_repeats=args.n_repeats,
        chunk_size=args.chunk_size,
        master_seed=args.seed,
        output_dir=args.output_dir,
    )

    print("Starting generation with settings:")
    print(settings)

    run_workload(settings)


if __name__ == "__main__":
    main()
