from __future__ import annotations

import logging
from collections.abc import Mapping

from filestore.encoding import decode_name, validate_name
from filestore.errors import BackendNotEnabledError
from filestore.intake import IntakeReader
from filestore.models.file import StorageTarget, StoredFile, TransferResult
from filestore.services.provisioning_service import ProvisioningService
from filestore.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class TransferService:
    def __init__(
        self,
        intake: IntakeReader,
        backends: Mapping[StorageTarget, StorageBackend],
        provisioning: ProvisioningService | None = None,
    ) -> None:
        self.intake = intake
        self.backends = dict(backends)
        self.provisioning = provisioning or ProvisioningService()

    def backend_for(self, target: StorageTarget | str) -> StorageBackend:
        try:
            return self.backends[StorageTarget(target)]
        except (KeyError, ValueError) as e:
            value = target.value if isinstance(target, StorageTarget) else target
            raise BackendNotEnabledError("Storage backend not enabled", value) from e

    def put(self, target: StorageTarget | str, payload: bytes) -> TransferResult:
        """Copy the intake file named by *payload* into the target backend."""
        backend = self.backend_for(target)
        name = decode_name(payload)
        content = self.intake.read(name)
        self.provisioning.before_write(backend)
        location = backend.put(name, content)
        message = f"File put {backend.destination_label}: {name}"
        logger.info("%s (%d chars)", message, len(content))
        return TransferResult(name=name, target=backend.target, location=location, message=message)

    def get(self, target: StorageTarget | str, name: str) -> StoredFile:
        backend = self.backend_for(target)
        name = validate_name(name)
        content = backend.get(name)
        logger.info("File read from %s: %s (%d chars)", backend.target.value, name, len(content))
        return StoredFile(name=name, content=content, target=backend.target)
