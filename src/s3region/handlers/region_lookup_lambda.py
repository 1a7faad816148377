from __future__ import annotations
import os
from typing import Any
from s3region.config.probe_config import RegionProbeConfig
from s3region.logging_config import configure_logging, get_logger
from s3region.storage.region_resolver import RegionResolver

BUCKET_ENV_VAR = 'S3REGION_BUCKET_NAME'

resolver: RegionResolver = None
logger = get_logger(__name__)

def require_env(var_name):
    value = os.getenv(var_name)
    if value is None or not value.strip():
        raise ValueError(f"Environment variable '{var_name}' is required but not set.")
    return value

def extract_bucket_name(event: Any) -> str:
    # Accepts a bare name, or the first dict key that mentions "bucket".
    if isinstance(event, str) and event:
        return event
    if isinstance(event, dict) and event:
        bucket_keys = [key for key in event if 'bucket' in str(key).lower()]
        if bucket_keys:
            bucket = event[bucket_keys[0]]
            if not isinstance(bucket, str) or not bucket:
                raise ValueError(f"Event field '{bucket_keys[0]}' must be a non-empty bucket name, got: {bucket!r}")
            return bucket
    return require_env(BUCKET_ENV_VAR)

def lambda_handler(event, context):
    configure_logging(level=os.getenv("LOG_LEVEL", "INFO"), service="s3region.handlers.region_lookup_lambda")
    global resolver
    try:
        if resolver is None:
            resolver = RegionResolver(RegionProbeConfig.from_env())
        bucket = extract_bucket_name(event)
        logger.info("Looking up bucket region: bucket=%s", bucket)
        region = resolver.resolve(bucket)
        return {"bucket": bucket, "region": region}
    except Exception:
        logger.exception("Unhandled error in region_lookup_lambda")
        raise

if __name__ == "__main__":
    print(lambda_handler({}, None))
