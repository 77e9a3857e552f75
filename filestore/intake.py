from __future__ import annotations

import logging
from pathlib import Path

from filestore.encoding import decode_source
from filestore.errors import ReadError, SourceNotFoundError
from filestore.paths import resolve_under

logger = logging.getLogger(__name__)


class IntakeReader:
    """Reads source files for a put from the intake directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def resolve(self, name: str) -> Path:
        return resolve_under(self.root, name)

    def list_names(self) -> list[str]:
        try:
            if not self.root.is_dir():
                return []
            base = self.root.resolve()
            return sorted(str(p.relative_to(base)) for p in base.rglob("*") if p.is_file())
        except OSError as e:
            raise ReadError("Failed to list intake directory", str(e)) from e

    def read(self, name: str) -> str:
        path = self.resolve(name)
        logger.debug("Reading intake file %s from %s", name, path)
        try:
            data = path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            data = None
        except OSError as e:
            raise ReadError("Failed to read file", str(e)) from e
        if data is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Intake directory %s contains: %s", self.root, self.list_names())
            raise SourceNotFoundError("File not found", name)
        content = decode_source(data, name)
        logger.debug("Read %d bytes from intake file %s", len(data), name)
        return content
