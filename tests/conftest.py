"""Root conftest: filesystem roots, in-memory SQLite engine and a fake S3 client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def client_error(code: str, operation: str = "Operation") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeBody:
    def __init__(self, data: bytes) -> None:
        self.data = data

    def read(self) -> bytes:
        return self.data


def make_fake_s3_client(buckets: set[str] | None = None) -> MagicMock:
    """MagicMock S3 client backed by dicts, enough for put/get/head/create."""
    existing = set(buckets or ())
    objects: dict[tuple[str, str], bytes] = {}
    client = MagicMock()

    def head_bucket(Bucket):
        if Bucket not in existing:
            raise client_error("404", "HeadBucket")
        return {}

    def create_bucket(Bucket, **kwargs):
        if Bucket in existing:
            raise client_error("BucketAlreadyOwnedByYou", "CreateBucket")
        existing.add(Bucket)
        return {}

    def put_object(Bucket, Key, Body, **kwargs):
        if Bucket not in existing:
            raise client_error("NoSuchBucket", "PutObject")
        objects[(Bucket, Key)] = Body
        return {}

    def get_object(Bucket, Key):
        if (Bucket, Key) not in objects:
            raise client_error("NoSuchKey", "GetObject")
        return {"Body": FakeBody(objects[(Bucket, Key)])}

    client.head_bucket.side_effect = head_bucket
    client.create_bucket.side_effect = create_bucket
    client.put_object.side_effect = put_object
    client.get_object.side_effect = get_object
    client.buckets = existing
    client.objects = objects
    return client


@pytest.fixture()
def intake_dir(tmp_path):
    path = tmp_path / "intake"
    path.mkdir()
    return path


@pytest.fixture()
def store_dir(tmp_path):
    return tmp_path / "local_store"


@pytest.fixture()
def db_engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def s3_client() -> MagicMock:
    return make_fake_s3_client()
