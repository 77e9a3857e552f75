from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from filestore.encoding import decode_stored
from filestore.errors import NotFoundError, ProvisionError, TransferError
from filestore.models.file import StorageTarget
from filestore.storage.base import ProvisioningPolicy, StorageBackend

logger = logging.getLogger(__name__)

MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}
MISSING_KEY_CODES = {"404", "NoSuchKey", "NotFound"}
EXISTING_BUCKET_CODES = {"BucketAlreadyOwnedByYou", "BucketAlreadyExists"}


def _error_code(e: ClientError) -> str:
    return str(e.response.get("Error", {}).get("Code", ""))


class S3Storage(StorageBackend):
    target = StorageTarget.S3
    destination_label = "to S3"
    provisioning = ProvisioningPolicy.PER_WRITE

    def __init__(self, bucket: str, client, region: str = "") -> None:
        self.bucket = bucket
        self.client = client
        self.region = region

    def put(self, name: str, content: str) -> str:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=name,
                Body=content.encode("utf-8"),
                ContentType="text/plain; charset=utf-8",
            )
        except (ClientError, BotoCoreError) as e:
            raise TransferError("Failed to put file to S3", str(e)) from e
        logger.debug("Uploaded %s to bucket %s", name, self.bucket)
        return f"s3://{self.bucket}/{name}"

    def get(self, name: str) -> str:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=name)
            data = response["Body"].read()
        except ClientError as e:
            if _error_code(e) in MISSING_KEY_CODES:
                raise NotFoundError("File not found in S3", name) from e
            raise TransferError("Failed to get file from S3", str(e)) from e
        except BotoCoreError as e:
            raise TransferError("Failed to get file from S3", str(e)) from e
        return decode_stored(data)

    def bucket_exists(self) -> bool | None:
        """Probe the bucket. ``None`` means the probe itself failed."""
        try:
            self.client.head_bucket(Bucket=self.bucket)
            return True
        except ClientError as e:
            if _error_code(e) in MISSING_BUCKET_CODES:
                return False
            logger.warning("Bucket probe for %s failed: %s", self.bucket, e)
            return None
        except BotoCoreError as e:
            logger.warning("Bucket probe for %s failed: %s", self.bucket, e)
            return None

    def provision(self) -> None:
        exists = self.bucket_exists()
        if exists:
            logger.debug("Bucket already exists: %s", self.bucket)
            return
        if exists is None:
            # Unknown state: skip creation and let the write report the real error.
            return

        kwargs: dict = {"Bucket": self.bucket}
        if self.region and self.region != "us-east-1":
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": self.region}
        try:
            self.client.create_bucket(**kwargs)
        except ClientError as e:
            if _error_code(e) in EXISTING_BUCKET_CODES:
                logger.info("Bucket %s was created concurrently", self.bucket)
                return
            raise ProvisionError("Failed to create bucket", str(e)) from e
        except BotoCoreError as e:
            raise ProvisionError("Failed to create bucket", str(e)) from e
        logger.info("Bucket created: %s", self.bucket)
