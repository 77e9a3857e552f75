from __future__ import annotations

import logging
from collections.abc import Iterable

from filestore.storage.base import ProvisioningPolicy, StorageBackend

logger = logging.getLogger(__name__)


class ProvisioningService:
    """Decides when a backend's bucket or table gets created.

    Nothing is cached: per-write backends are probed on every put, so a
    resource deleted behind our back is recreated on the next write.
    """

    def provision_at_startup(self, backends: Iterable[StorageBackend]) -> None:
        for backend in backends:
            if backend.provisioning is ProvisioningPolicy.STARTUP:
                logger.info("Provisioning %s backend at startup", backend.target.value)
                backend.provision()

    def before_write(self, backend: StorageBackend) -> None:
        if backend.provisioning is ProvisioningPolicy.PER_WRITE:
            logger.debug("Ensuring %s resource before write", backend.target.value)
            backend.provision()
