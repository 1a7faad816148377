import pytest

from s3region.config.probe_config import DEFAULT_HINT_REGION, RegionProbeConfig
from s3region.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("S3REGION_HINT_REGION", "S3REGION_ENDPOINT", "S3REGION_CONNECT_TIMEOUT", "S3REGION_READ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults():
    config = RegionProbeConfig()
    assert config.hint_region == "us-east-1" == DEFAULT_HINT_REGION
    assert config.endpoint is None
    assert config.connect_timeout is None
    assert config.read_timeout is None


@pytest.mark.parametrize("hint_region", ["", "   "])
def test_blank_hint_region_rejected(hint_region):
    with pytest.raises(ConfigurationError, match="hint_region"):
        RegionProbeConfig(hint_region=hint_region)


def test_non_positive_timeout_rejected():
    with pytest.raises(ConfigurationError, match="read_timeout"):
        RegionProbeConfig(read_timeout=0)


def test_from_env_ignores_ambient_aws_region(clean_env):
    clean_env.setenv("AWS_REGION", "eu-west-3")
    clean_env.setenv("AWS_DEFAULT_REGION", "eu-west-3")
    assert RegionProbeConfig.from_env().hint_region == DEFAULT_HINT_REGION


def test_from_env_reads_overrides(clean_env):
    clean_env.setenv("S3REGION_HINT_REGION", "us-gov-west-1")
    clean_env.setenv("S3REGION_ENDPOINT", "http://minio:9000")
    clean_env.setenv("S3REGION_CONNECT_TIMEOUT", "1.5")
    clean_env.setenv("S3REGION_READ_TIMEOUT", "3")

    config = RegionProbeConfig.from_env()
    assert config == RegionProbeConfig(
        hint_region="us-gov-west-1",
        endpoint="http://minio:9000",
        connect_timeout=1.5,
        read_timeout=3.0,
    )


def test_from_env_rejects_bad_timeout(clean_env):
    clean_env.setenv("S3REGION_READ_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="S3REGION_READ_TIMEOUT"):
        RegionProbeConfig.from_env()
