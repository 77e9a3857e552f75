"""Web test fixtures: TestClient over temp dirs, in-memory SQLite and a fake S3 client."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from filestore.intake import IntakeReader
from filestore.models.file import StorageTarget
from filestore.services.provisioning_service import ProvisioningService
from filestore.services.transfer_service import TransferService
from filestore.storage.local import LocalStorage
from filestore.storage.s3 import S3Storage
from filestore.storage.sql import SQLStorage


@pytest.fixture()
def transfer_service(intake_dir, store_dir, db_engine, s3_client) -> TransferService:
    backends = {
        StorageTarget.LOCAL: LocalStorage(str(store_dir)),
        StorageTarget.S3: S3Storage(bucket="files", client=s3_client),
        StorageTarget.MYSQL: SQLStorage(db_engine),
    }
    return TransferService(IntakeReader(intake_dir), backends, ProvisioningService())


@pytest.fixture()
def client(monkeypatch, transfer_service):
    import web.app as app_module

    monkeypatch.setattr(app_module, "build_transfer_service", lambda: transfer_service)
    monkeypatch.setattr(app_module, "dispose_engine", lambda: None)

    with TestClient(app_module.app) as test_client:
        yield test_client
