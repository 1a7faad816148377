from __future__ import annotations
from typing import Any, Callable
import boto3
from botocore import UNSIGNED
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from s3region.config.probe_config import RegionProbeConfig
from s3region.errors import ConfigurationError, ResolutionError
from s3region.logging_config import get_logger, with_context
from s3region.models import BucketRegionProbe


logger = get_logger(__name__)

SessionFactory = Callable[[], Any]


def _suppress_region_redirect(context, **kwargs):
    # Marks the request as already redirected; botocore's S3 redirector then leaves a 301 alone.
    context.setdefault("s3_redirect", {})["redirected"] = True


class RegionResolver:
    """
    Looks up the region of an S3 bucket with a single anonymous HeadBucket call.

    The client is pointed at ``config.hint_region`` only so the request reaches
    the right partition; S3 reports the bucket's real region in the
    ``x-amz-bucket-region`` header, including on 301 and 403 responses.
    ``session_factory`` supplies the ambient AWS configuration (``~/.aws/config``
    and friends) and can be swapped out in tests.
    """

    def __init__(self, config: RegionProbeConfig | None = None, session_factory: SessionFactory | None = None):
        self.config = config or RegionProbeConfig()
        self.session_factory = session_factory or boto3.Session

    def _client_config(self, timeout: float | None) -> Config:
        config_kwargs: dict[str, Any] = {
            "signature_version": UNSIGNED,
            "retries": {"total_max_attempts": 1},
        }
        connect_timeout = timeout or self.config.connect_timeout
        read_timeout = timeout or self.config.read_timeout
        if connect_timeout:
            config_kwargs["connect_timeout"] = connect_timeout
        if read_timeout:
            config_kwargs["read_timeout"] = read_timeout
        return Config(**config_kwargs)

    def _build_client(self, timeout: float | None = None):
        if timeout is not None and timeout <= 0:
            raise ConfigurationError(f"timeout must be > 0, got: {timeout}")
        client_kwargs: dict[str, Any] = {
            "region_name": self.config.hint_region,
            "config": self._client_config(timeout),
        }
        if self.config.endpoint:
            client_kwargs["endpoint_url"] = self.config.endpoint
        try:
            session = self.session_factory()
            client = session.client("s3", **client_kwargs)
        except (BotoCoreError, ValueError) as e:
            raise ConfigurationError(f"Unable to build S3 client for region lookup: {e}") from e
        client.meta.events.register(
            "before-call.s3.HeadBucket", _suppress_region_redirect, unique_id="s3region-suppress-redirect"
        )
        return client

    def probe(self, bucket: str, timeout: float | None = None) -> BucketRegionProbe:
        client = self._build_client(timeout)
        log = with_context(logger, bucket=bucket, hint_region=self.config.hint_region)
        log.debug("Probing bucket region")
        try:
            response = client.head_bucket(Bucket=bucket)
        except ClientError as e:
            result = BucketRegionProbe.from_response(bucket, e.response)
            if result.resolved:
                log.info("Resolved bucket region from error response: region=%s status=%s", result.region, result.http_status)
                return result
            code = e.response.get("Error", {}).get("Code")
            log.warning("Bucket region probe failed: code=%s", code)
            raise ResolutionError(bucket, str(e), error_code=code) from e
        except BotoCoreError as e:
            log.warning("Bucket region probe failed: %s", e)
            raise ResolutionError(bucket, str(e)) from e

        result = BucketRegionProbe.from_response(bucket, response)
        if not result.resolved:
            log.warning("HeadBucket response carried no region: status=%s", result.http_status)
            raise ResolutionError(bucket, "HeadBucket response did not include a bucket region")
        log.info("Resolved bucket region: region=%s", result.region)
        return result

    def resolve(self, bucket: str, timeout: float | None = None) -> str:
        return self.probe(bucket, timeout=timeout).region


def get_bucket_region(bucket: str, timeout: float | None = None) -> str:
    """Return the region ``bucket`` lives in, or raise ResolutionError."""
    return RegionResolver().resolve(bucket, timeout=timeout)
