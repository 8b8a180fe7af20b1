from .core import ZipfParameterError, ZipfParams, ZipfSampler
from .distributions import make_zipf_law, zipf_pmf, zipf_weights
from .numerics import EPSILON, PowerLawHat, expxm1bx, log1pxbx
from .registry import SamplerSpec, default_registry, make_sampler
from .rejection import RejectionInversionZipf
from .table import TableZipf

__all__ = [
    "EPSILON",
    "PowerLawHat",
    "RejectionInversionZipf",
    "SamplerSpec",
    "TableZipf",
    "ZipfParameterError",
    "ZipfParams",
    "ZipfSampler",
    "default_registry",
    "expxm1bx",
    "log1pxbx",
    "make_sampler",
    "make_zipf_law",
    "zipf_pmf",
    "zipf_weights",
]
