import json
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

import numpy as np

from ..utils import to_jsonable


class WorkloadWriter(Protocol):
    def save_workload(
        self,
        method: str,
        params: Any,
        repeats: list[dict],
    ) -> Path | None: ...


@dataclass(slots=True)
class NPZWriter:
    base_dir: Path
    n_repeats: int = 1

    def save_workload(
        self,
        method: str,
        params: Any,
        repeats: list[dict],
    ) -> Path:
        rep_width = len(str(max(self.n_repeats - 1, 0)))

        target_dir = Path(self.base_dir) / method
        os.makedirs(target_dir, exist_ok=True)

        base_name = f"{method}_n{params.n}"
        npz_path = target_dir / f"{base_name}.npz"
        meta_path = target_dir / f"{base_name}.json"

        save_dict: dict[str, np.ndarray] = {}
        seeds: dict[str, int] = {}

        for rep_idx, rep in enumerate(repeats):
            key = f"rep{rep_idx:0{rep_width}d}"
            save_dict[f"{key}_keys"] = np.asarray(rep["keys"], dtype=np.int64)
            seeds[key] = int(rep["seed"])

        np.savez_compressed(npz_path, **save_dict)

        meta = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "method": method,
            "n_repeats": len(repeats),
            "file": os.path.relpath(npz_path, self.base_dir),
            "seeds": seeds,
            "params": to_jsonable(params),
        }

        meta_path.write_text(json.dumps(meta, indent=2), encoding="utf-8")
        return npz_path
