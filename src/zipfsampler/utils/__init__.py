from .jsonable import to_jsonable
from .stats import observed_counts, pooled_chisquare, two_sample_chisquare

__all__ = [
    "observed_counts",
    "pooled_chisquare",
    "to_jsonable",
    "two_sample_chisquare",
]
