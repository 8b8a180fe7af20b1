import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from ..sampling import zipf_pmf
from ..sampling.core import ZipfParams
from ..utils import observed_counts, pooled_chisquare, to_jsonable

logger = logging.getLogger(__name__)


def fit_report(params: ZipfParams, repeats: list[dict]) -> list[dict]:
    """Chi-square fit of every repeat against the exact law."""
    expected = zipf_pmf(params.n, params.s, params.q)
    rows = []
    for rep_idx, rep in enumerate(repeats):
        keys = np.asarray(rep["keys"])
        stat, p = pooled_chisquare(observed_counts(keys, params.n), expected)
        rows.append(
            {
                "repeat": rep_idx,
                "n_draws": int(keys.size),
                "mean": float(keys.mean()) if keys.size else float("nan"),
                "chi2": stat,
                "p_value": p,
            }
        )
    return rows


def save_fit_report(rows: list[dict], output_dir: Path) -> None:
    """Write the goodness-of-fit rows to JSON."""
    try:
        report_file = output_dir / "fit_report.json"
        with open(report_file, "w") as f:
            json.dump(rows, f, indent=4)
        logger.info(f"Fit report saved to {report_file}")
    except Exception as e:
        logger.error(f"Failed to save fit report: {e}")


def save_run_metadata(
    settings_dict: dict,
    pipeline_duration: float,
    total_draw_time: float,
    output_dir: Path,
) -> None:
    """Write run metadata to JSON."""
    try:
        metadata = to_jsonable(settings_dict)
        metadata.update(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "pipeline_duration": pipeline_duration,
                "total_draw_time": total_draw_time,
            }
        )

        metadata_file = output_dir / "run_metadata.json"
        with open(metadata_file, "w") as f:
            json.dump(metadata, f, indent=4)
    except Exception as e:
        logger.error(f"Failed to save run metadata: {e}")
