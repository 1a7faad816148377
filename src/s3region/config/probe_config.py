from __future__ import annotations
import os
from dataclasses import dataclass
from s3region.errors import ConfigurationError

DEFAULT_HINT_REGION = "us-east-1"


def _optional_env(var_name: str) -> str | None:
    value = os.getenv(var_name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _float_env(var_name: str) -> float | None:
    raw = _optional_env(var_name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{var_name} must be a number, got: {raw!r}") from exc


@dataclass(frozen=True)
class RegionProbeConfig:
    # Selects the partition endpoint that answers the probe, not the bucket's region.
    hint_region: str = DEFAULT_HINT_REGION
    endpoint: str | None = None
    connect_timeout: float | None = None
    read_timeout: float | None = None

    def __post_init__(self):
        if not self.hint_region or not self.hint_region.strip():
            raise ConfigurationError("RegionProbeConfig.hint_region must be a non-empty string.")
        for name in ("connect_timeout", "read_timeout"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigurationError(f"RegionProbeConfig.{name} must be > 0, got: {value}")

    @classmethod
    def from_env(cls) -> "RegionProbeConfig":
        # AWS_REGION / AWS_DEFAULT_REGION never feed the hint region.
        return cls(
            hint_region=_optional_env("S3REGION_HINT_REGION") or DEFAULT_HINT_REGION,
            endpoint=_optional_env("S3REGION_ENDPOINT"),
            connect_timeout=_float_env("S3REGION_CONNECT_TIMEOUT"),
            read_timeout=_float_env("S3REGION_READ_TIMEOUT"),
        )
