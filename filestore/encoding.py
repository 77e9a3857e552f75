"""UTF-8 policy for names and content.

Names and intake files are decoded strictly. Everything read back from a
backend goes through ``decode_stored`` so an existing entry is always
readable, whichever backend holds it.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from filestore.errors import InvalidEncodingError, InvalidNameError

STRICT = "strict"
STORED_CONTENT_ERRORS = "replace"


def decode_name(payload: bytes) -> str:
    try:
        name = payload.decode("utf-8", errors=STRICT)
    except UnicodeDecodeError as e:
        raise InvalidEncodingError("Invalid UTF-8 sequence", str(e)) from e
    return validate_name(name)


def validate_name(name: str) -> str:
    """Return the canonical form of *name*, or raise ``InvalidNameError``.

    Every backend keys entries by this form, so ``./a//b.txt``, ``a\\b.txt`` and
    ``a/b.txt`` all name the same file.
    """
    name = name.strip()
    if not name:
        raise InvalidNameError("Invalid file name", "name is empty")
    if "\x00" in name:
        raise InvalidNameError("Invalid file name", "name contains a NUL byte")
    path = PurePosixPath(name.replace("\\", "/"))
    if not path.parts:
        raise InvalidNameError("Invalid file name", f"not a file path: {name}")
    if path.is_absolute():
        raise InvalidNameError("Invalid file name", f"absolute path not allowed: {name}")
    if ".." in path.parts:
        raise InvalidNameError("Invalid file name", f"parent references not allowed: {name}")
    return path.as_posix()


def decode_source(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8", errors=STRICT)
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f"File is not valid UTF-8: {source}", str(e)) from e


def decode_stored(data: bytes) -> str:
    return data.decode("utf-8", errors=STORED_CONTENT_ERRORS)
