from __future__ import annotations

from pathlib import Path

from filestore.encoding import validate_name
from filestore.errors import InvalidNameError


def resolve_under(root: Path, name: str) -> Path:
    """Join *name* under *root*, refusing anything that lands outside it.

    Symlinks are followed, so a link inside the root pointing elsewhere is
    rejected as well.
    """
    name = validate_name(name)
    base = root.resolve()
    path = (base / name).resolve()
    if path == base or not path.is_relative_to(base):
        raise InvalidNameError("Invalid file name", f"{name} escapes {root}")
    return path
