from abc import ABC, abstractmethod
from enum import Enum

from filestore.models.file import StorageTarget


class ProvisioningPolicy(str, Enum):
    IMPLICIT = "implicit"  # created by the write itself
    STARTUP = "startup"  # created once when the app starts
    PER_WRITE = "per_write"  # ensured before every write


class StorageBackend(ABC):
    target: StorageTarget
    destination_label: str
    provisioning: ProvisioningPolicy = ProvisioningPolicy.IMPLICIT

    @abstractmethod
    def put(self, name: str, content: str) -> str:
        """Store content under name, replacing or appending, and return its location."""
        ...

    @abstractmethod
    def get(self, name: str) -> str:
        """Return the stored content for name or raise ``NotFoundError``."""
        ...

    def provision(self) -> None:
        """Make sure the destination resource exists. Must be idempotent."""
        return None
