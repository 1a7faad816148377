from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Any

BUCKET_REGION_HEADER = "x-amz-bucket-region"
ACCESS_POINT_ALIAS_HEADER = "x-amz-access-point-alias"


# Region details S3 returns for a HeadBucket probe, successful or not.
class BucketRegionProbe(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)
    bucket: str = Field(..., description="Bucket name that was probed.")
    region: Optional[str] = Field(None, alias="BucketRegion", description="Region the bucket resides in, if S3 disclosed it.")
    access_point_alias: Optional[bool] = Field(None, alias="AccessPointAlias", description="Whether the bucket name is an access point alias.")
    http_status: Optional[int] = Field(None, alias="HTTPStatusCode", description="HTTP status of the probe response.")

    @field_validator("region", mode="before")
    @classmethod
    def _blank_region_is_unknown(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("access_point_alias", mode="before")
    @classmethod
    def _parse_header_bool(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value

    @property
    def resolved(self) -> bool:
        return self.region is not None

    @classmethod
    def from_response(cls, bucket: str, response: dict[str, Any]) -> "BucketRegionProbe":
        """
        Build a probe result from a HeadBucket response or a ClientError's
        ``response`` dict. The modelled ``BucketRegion`` field wins over the
        raw header when both are present.
        """
        metadata = response.get("ResponseMetadata", {}) or {}
        headers = {key.lower(): value for key, value in (metadata.get("HTTPHeaders") or {}).items()}
        return cls.model_validate({
            "bucket": bucket,
            "BucketRegion": response.get("BucketRegion") or headers.get(BUCKET_REGION_HEADER),
            "AccessPointAlias": response.get("AccessPointAlias", headers.get(ACCESS_POINT_ALIAS_HEADER)),
            "HTTPStatusCode": metadata.get("HTTPStatusCode"),
        })
