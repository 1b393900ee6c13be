# ecotrack/core/s3.py
import logging
import uuid
from typing import BinaryIO, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ecotrack.core.config import settings
from ecotrack.core.exceptions import EcoTrackError

logger = logging.getLogger(__name__)

ACTIVITY_IMAGE_PREFIX = "activities"


class ImageUploadError(EcoTrackError):
    """The object store rejected or could not receive an image."""


def get_s3_client():
    """
    Initializes and returns an S3 client.
    Conditionally configures the endpoint_url for local development with MinIO.
    """
    if settings.AWS_S3_ENDPOINT_URL:
        return boto3.client(
            "s3",
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION,
        )
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_S3_REGION,
    )


def _public_url(key: str) -> str:
    bucket = settings.AWS_S3_BUCKET_NAME
    if settings.AWS_S3_ENDPOINT_URL:
        return f"{settings.AWS_S3_ENDPOINT_URL.rstrip('/')}/{bucket}/{key}"
    return f"https://{bucket}.s3.{settings.AWS_S3_REGION}.amazonaws.com/{key}"


def upload_image(
    fileobj: BinaryIO, filename: Optional[str], content_type: Optional[str]
) -> str:
    """Stores one activity photo and returns its public URL."""
    if not settings.AWS_S3_BUCKET_NAME:
        raise ImageUploadError("Image storage is not configured")

    extension = ""
    if filename and "." in filename:
        extension = "." + filename.rsplit(".", 1)[1].lower()
    key = f"{ACTIVITY_IMAGE_PREFIX}/{uuid.uuid4().hex}{extension}"

    s3_client = get_s3_client()
    try:
        s3_client.upload_fileobj(
            fileobj,
            settings.AWS_S3_BUCKET_NAME,
            key,
            ExtraArgs={"ContentType": content_type or "application/octet-stream"},
        )
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to upload image {filename!r}: {e}")
        raise ImageUploadError("Failed to upload image") from e

    return _public_url(key)
