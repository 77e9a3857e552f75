import logging

import boto3

from filestore.models.file import StorageTarget
from filestore.settings import settings
from filestore.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def build_s3_client():
    client_kwargs: dict = {
        "service_name": "s3",
        "region_name": settings.s3_region or "us-east-1",
        "aws_access_key_id": settings.s3_access_key_id or None,
        "aws_secret_access_key": settings.s3_secret_access_key or None,
    }
    if settings.s3_endpoint_url:
        client_kwargs["endpoint_url"] = settings.s3_endpoint_url
    return boto3.client(**client_kwargs)


def get_storage(target: StorageTarget | str) -> StorageBackend:
    target = StorageTarget(target)

    if target is StorageTarget.LOCAL:
        from filestore.storage.local import LocalStorage

        logger.info("Using storage backend: local dir=%s", settings.local_store_dir)
        return LocalStorage(settings.local_store_dir)

    if target is StorageTarget.S3:
        from filestore.storage.s3 import S3Storage

        logger.info("Using storage backend: s3 bucket=%s", settings.s3_bucket)
        return S3Storage(bucket=settings.s3_bucket, client=build_s3_client(), region=settings.s3_region)

    if target is StorageTarget.MYSQL:
        from filestore.db import get_engine
        from filestore.storage.sql import SQLStorage

        logger.info("Using storage backend: mysql table=%s", settings.db_table)
        return SQLStorage(get_engine(), table_name=settings.db_table)

    raise ValueError(f"Unsupported storage backend: {target}")


def get_storage_backends() -> dict[StorageTarget, StorageBackend]:
    backends: dict[StorageTarget, StorageBackend] = {}
    for name in settings.enabled_backends:
        try:
            target = StorageTarget(name)
        except ValueError as e:
            raise ValueError(f"Unsupported storage backend: {name}") from e
        backends[target] = get_storage(target)
    return backends
