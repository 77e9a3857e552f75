from __future__ import annotations

import logging

from sqlalchemy import Column, Integer, MetaData, String, Table, Text, insert, select
from sqlalchemy.dialects import mysql
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from filestore.encoding import decode_stored
from filestore.errors import DecodeError, NotFoundError, ProvisionError, TransferError
from filestore.models.file import StorageTarget
from filestore.storage.base import ProvisioningPolicy, StorageBackend

logger = logging.getLogger(__name__)


def datasets_table(name: str = "datasets", metadata: MetaData | None = None) -> Table:
    return Table(
        name,
        metadata or MetaData(),
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(255), nullable=False),
        Column("data", Text().with_variant(mysql.LONGTEXT(), "mysql"), nullable=False),
    )


class SQLStorage(StorageBackend):
    target = StorageTarget.MYSQL
    destination_label = "to MySQL"
    provisioning = ProvisioningPolicy.STARTUP

    def __init__(self, engine: Engine, table_name: str = "datasets") -> None:
        self.engine = engine
        self.table = datasets_table(table_name)

    def provision(self) -> None:
        try:
            with self.engine.begin() as conn:
                conn.execute(CreateTable(self.table, if_not_exists=True))
        except SQLAlchemyError as e:
            raise ProvisionError("Failed to ensure table exists", str(e)) from e
        logger.info("Table %s is ready", self.table.name)

    def put(self, name: str, content: str) -> str:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(insert(self.table).values(name=name, data=content))
        except SQLAlchemyError as e:
            raise TransferError("Failed to put file to MySQL", str(e)) from e
        row_id = result.inserted_primary_key[0] if result.inserted_primary_key else None
        logger.debug("Inserted %s into %s (id=%s)", name, self.table.name, row_id)
        return f"{self.table.name}/{row_id}"

    def get(self, name: str) -> str:
        # Names are not unique; the latest insert wins.
        stmt = (
            select(self.table.c.data)
            .where(self.table.c.name == name)
            .order_by(self.table.c.id.desc())
            .limit(1)
        )
        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt).first()
        except SQLAlchemyError as e:
            raise TransferError("Failed to get file from MySQL", str(e)) from e
        if row is None:
            raise NotFoundError("File not found in MySQL", name)

        value = row[0]
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return decode_stored(bytes(value))
        raise DecodeError("Failed to decode TEXT column", f"unexpected {type(value).__name__} value")
