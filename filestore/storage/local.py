import logging
from pathlib import Path

from filestore.encoding import decode_stored
from filestore.errors import NotFoundError, TransferError
from filestore.models.file import StorageTarget
from filestore.paths import resolve_under
from filestore.storage.base import ProvisioningPolicy, StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    target = StorageTarget.LOCAL
    destination_label = "locally"
    provisioning = ProvisioningPolicy.IMPLICIT

    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)

    def put(self, name: str, content: str) -> str:
        path = resolve_under(self.base_dir, name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransferError("Failed to create directories", str(e)) from e
        data = content.encode("utf-8")
        try:
            path.write_bytes(data)
        except OSError as e:
            raise TransferError("Failed to write file", str(e)) from e
        resolved = str(path)
        logger.debug("Saved %s (%d bytes) to %s", name, len(data), resolved)
        return resolved

    def get(self, name: str) -> str:
        path = resolve_under(self.base_dir, name)
        logger.debug("Reading %s from %s", name, path)
        try:
            data = path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise NotFoundError("File not found", name) from e
        except OSError as e:
            raise TransferError("Failed to read file", str(e)) from e
        return decode_stored(data)
