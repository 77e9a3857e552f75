from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class StorageTarget(str, Enum):
    LOCAL = "local"
    S3 = "s3"
    MYSQL = "mysql"


class StoredFile(BaseModel):
    name: str
    content: str
    target: StorageTarget


class TransferResult(BaseModel):
    name: str
    target: StorageTarget
    location: str = ""
    message: str
