import logging
import mimetypes
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from jobboard.config import settings
from jobboard.core.errors import UpstreamFailureError, ValidationError
from jobboard.core.security import generate_id

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPES = {"image/png", "image/jpeg", "image/gif", "image/webp"}


@dataclass(frozen=True)
class BlobPayload:
    data: bytes
    content_type: str
    filename: str


class BlobStore:
    """Public object storage on S3: put returns a public URL, delete takes that URL back."""

    def __init__(self, client, bucket: str, public_base_url: str | None = None):
        self._client = client
        self._bucket = bucket
        self._base_url = (
            public_base_url or f"https://{bucket}.s3.{settings.aws_region}.amazonaws.com"
        ).rstrip("/")

    def url_for(self, key: str) -> str:
        return f"{self._base_url}/{key}"

    def key_for(self, url: str) -> str | None:
        prefix = f"{self._base_url}/"
        if not url or not url.startswith(prefix):
            return None
        return url[len(prefix):] or None

    def put(self, path: str, data: bytes, content_type: str) -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Blob upload failed for key=%s: %s", path, e)
            raise UpstreamFailureError("Failed to store uploaded file") from e
        logger.info("Stored blob %s (%d bytes)", path, len(data))
        return self.url_for(path)

    def delete(self, url: str) -> None:
        """Best-effort: failures are logged, never raised."""
        key = self.key_for(url)
        if key is None:
            logger.warning("Skipping blob delete for foreign url: %s", url)
            return
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
            logger.info("Deleted blob %s", key)
        except (BotoCoreError, ClientError) as e:
            logger.warning("Blob delete failed for key=%s: %s", key, e)


@lru_cache(maxsize=1)
def get_blob_store() -> BlobStore:
    client = boto3.client("s3", region_name=settings.aws_region)
    return BlobStore(client, settings.blob_bucket, settings.blob_public_base_url)


def build_key(folder: str, owner_id: str, filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    return f"{folder}/{owner_id}/{generate_id()}{ext}"


def read_upload(upload: UploadFile | None, *, image_only: bool = False) -> BlobPayload | None:
    """Read and validate an optional multipart upload. Returns None when no file was sent."""
    if upload is None or not upload.filename:
        return None
    data = upload.file.read()
    if not data:
        raise ValidationError("Uploaded file is empty")
    max_bytes = settings.max_upload_mb * 1024 * 1024
    if len(data) > max_bytes:
        raise ValidationError(f"File too large. Max allowed is {settings.max_upload_mb}MB.")
    content_type = (
        upload.content_type
        or mimetypes.guess_type(upload.filename)[0]
        or "application/octet-stream"
    )
    if image_only and content_type not in IMAGE_CONTENT_TYPES:
        raise ValidationError("Invalid image type. Allowed: PNG, JPEG, GIF, WEBP.")
    return BlobPayload(data=data, content_type=content_type, filename=upload.filename)


def store_payload(store: BlobStore, payload: BlobPayload, folder: str, owner_id: str) -> str:
    return store.put(build_key(folder, owner_id, payload.filename), payload.data, payload.content_type)
