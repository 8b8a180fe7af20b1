from .pipeline import WorkloadSettings, generate_keys, run_workload
from .reporting import fit_report
from .writer import NPZWriter, WorkloadWriter

__all__ = [
    "NPZWriter",
    "WorkloadSettings",
    "WorkloadWriter",
    "fit_report",
    "generate_keys",
    "run_workload",
]
