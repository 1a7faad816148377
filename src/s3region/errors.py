from __future__ import annotations


class S3RegionError(RuntimeError):
    pass


class ConfigurationError(S3RegionError):
    """Local client setup failed; no request was sent."""


class ResolutionError(S3RegionError):
    """The HeadBucket probe did not yield a region."""

    def __init__(self, bucket: str, cause: str, error_code: str | None = None) -> None:
        super().__init__(f"unable to determine bucket's region: {cause}")
        self.bucket = bucket
        self.cause = cause
        self.error_code = error_code
