import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="FILESTORE_", extra="ignore", populate_by_name=True
    )

    intake_dir: str = "/usr/src/app/Downloads"
    local_store_dir: str = "local_store"

    # Either a JSON list or a comma-separated string such as "local,s3".
    enabled_backends: Annotated[list[str], NoDecode] = ["local", "s3", "mysql"]

    s3_endpoint_url: str = Field(
        default="",
        validation_alias=AliasChoices("FILESTORE_S3_ENDPOINT_URL", "MINIO_ENDPOINT"),
    )
    s3_bucket: str = Field(
        default="",
        validation_alias=AliasChoices("FILESTORE_S3_BUCKET", "MINIO_BUCKET"),
    )
    s3_region: str = "us-east-1"
    s3_access_key_id: str = Field(
        default="",
        validation_alias=AliasChoices("FILESTORE_S3_ACCESS_KEY_ID", "MINIO_ACCESS_KEY"),
    )
    s3_secret_access_key: str = Field(
        default="",
        validation_alias=AliasChoices("FILESTORE_S3_SECRET_ACCESS_KEY", "MINIO_SECRET_KEY"),
    )

    db_url: str = Field(
        default="mysql+pymysql://filestore:filestore@db:3306/filestore",
        validation_alias=AliasChoices("FILESTORE_DB_URL", "MYSQL_URL"),
    )
    db_table: str = "datasets"
    db_pool_size: int = 5

    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("enabled_backends", mode="before")
    @classmethod
    def _split_backends(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [part.strip() for part in value.split(",") if part.strip()]


settings = Settings()
