from collections.abc import Callable
from dataclasses import dataclass

from .core import ZipfParameterError, ZipfParams, ZipfSampler
from .rejection import RejectionInversionZipf
from .table import TableZipf

# Largest table we are willing to allocate (~80 MB of float64 masses).
TABLE_MAX_N = 10_000_000
# Below this size the table stays cache-resident and wins per draw.
AUTO_TABLE_MAX_N = 1000


@dataclass(frozen=True, slots=True)
class SamplerSpec:
    name: str
    sampler_cls: type[ZipfSampler]
    supports_params: Callable[[ZipfParams], bool]


def default_registry() -> list[SamplerSpec]:
    return [
        SamplerSpec(
            "rejection",
            RejectionInversionZipf,
            lambda params: True,
        ),
        SamplerSpec(
            "table",
            TableZipf,
            lambda params: params.n <= TABLE_MAX_N,
        ),
    ]


def resolve_method(n: int, method: str = "auto") -> str:
    if method == "auto":
        return "table" if n <= AUTO_TABLE_MAX_N else "rejection"
    return method


def make_sampler(n: int, s: float = 1.0, q: float = 0.0, method: str = "auto") -> ZipfSampler:
    """Build a validated sampler for ``P(k) ~ (k+q)^(-s)`` on ``[1, n]``."""
    params = ZipfParams(n, float(s), float(q)).validate()
    name = resolve_method(params.n, method)

    specs = {spec.name: spec for spec in default_registry()}
    if name not in specs:
        raise KeyError(f"Unknown sampler method {name!r}; choose from {sorted(specs)}")

    spec = specs[name]
    if not spec.supports_params(params):
        raise ZipfParameterError(f"Sampler {name!r} does not support n={params.n}")
    return spec.sampler_cls(params.n, params.s, params.q)
