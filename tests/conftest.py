"""Shared fixtures: S3 clients with stubbed HeadBucket responses."""

import os

import boto3
import pytest
from botocore import UNSIGNED
from botocore.client import Config
from botocore.stub import Stubber

from s3region.storage.region_resolver import RegionResolver


def pytest_configure(config):
    """Keep tests independent of the developer's ~/.aws files."""
    os.environ["AWS_CONFIG_FILE"] = os.path.join(os.sep, "nonexistent", "aws-config")
    os.environ["AWS_SHARED_CREDENTIALS_FILE"] = os.path.join(os.sep, "nonexistent", "aws-credentials")
    os.environ.pop("AWS_PROFILE", None)
    os.environ["AWS_EC2_METADATA_DISABLED"] = "true"
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-southeast-2")


class RecordingSession:
    """Stands in for boto3.Session, handing out one prepared client."""

    def __init__(self, client):
        self._client = client
        self.client_calls = []

    def client(self, service_name, **kwargs):
        self.client_calls.append((service_name, kwargs))
        return self._client


@pytest.fixture
def s3_client():
    return boto3.client("s3", region_name="us-east-1", config=Config(signature_version=UNSIGNED))


@pytest.fixture
def stubber(s3_client):
    with Stubber(s3_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def session(s3_client):
    return RecordingSession(s3_client)


@pytest.fixture
def resolver(session):
    return RegionResolver(session_factory=lambda: session)
