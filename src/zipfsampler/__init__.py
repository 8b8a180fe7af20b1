from .sampling import (
    EPSILON,
    RejectionInversionZipf,
    TableZipf,
    ZipfParameterError,
    ZipfParams,
    ZipfSampler,
    make_sampler,
    zipf_pmf,
)

__all__ = [
    "EPSILON",
    "RejectionInversionZipf",
    "TableZipf",
    "ZipfParameterError",
    "ZipfParams",
    "ZipfSampler",
    "make_sampler",
    "zipf_pmf",
]
