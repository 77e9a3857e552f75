from __future__ import annotations

import logging

from fastapi import Request

from filestore.intake import IntakeReader
from filestore.services.provisioning_service import ProvisioningService
from filestore.services.transfer_service import TransferService
from filestore.settings import settings
from filestore.storage.factory import get_storage_backends

logger = logging.getLogger(__name__)


def build_transfer_service() -> TransferService:
    """Wire backends from settings. Runs once per process, in the app lifespan."""
    backends = get_storage_backends()
    logger.info("Enabled storage backends: %s", ", ".join(t.value for t in backends))
    return TransferService(IntakeReader(settings.intake_dir), backends, ProvisioningService())


def get_transfer_service(request: Request) -> TransferService:
    return request.app.state.transfer_service
