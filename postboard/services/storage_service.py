import logging
import os
import tempfile
import uuid
from contextlib import contextmanager, suppress

import urllib3
from flask import current_app
from minio import Minio

from postboard.errors import StorageError


logger = logging.getLogger(__name__)


def build_minio_client(config) -> Minio:
    """Build the storage client for an app config.

    Requests go through a pool with explicit connect/read timeouts and no
    retries.
    """
    http_client = urllib3.PoolManager(
        timeout=urllib3.Timeout(
            connect=config["MINIO_CONNECT_TIMEOUT"],
            read=config["MINIO_READ_TIMEOUT"],
        ),
        retries=False,
        maxsize=config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )
    return Minio(
        config["MINIO_ENDPOINT"],
        access_key=config["MINIO_ACCESS_KEY"],
        secret_key=config["MINIO_SECRET_KEY"],
        region=config.get("MINIO_REGION"),
        secure=config["MINIO_SECURE"],
        http_client=http_client,
    )


def init_storage(app) -> None:
    app.extensions["minio"] = build_minio_client(app.config)


def get_minio_client() -> Minio:
    return current_app.extensions["minio"]


def build_object_url(object_name: str) -> str:
    base_url = current_app.config["MEDIA_PUBLIC_BASE_URL"].rstrip("/")
    return f"{base_url}/{object_name}"


def build_object_name(original_filename: str | None) -> str:
    """Random object key that keeps the uploaded file's extension."""
    _, extension = os.path.splitext(original_filename or "")
    suffix = extension[1:]
    if not (suffix.isascii() and suffix.isalnum()):
        return uuid.uuid4().hex
    return f"{uuid.uuid4().hex}.{suffix.lower()}"


@contextmanager
def staged_upload(file_storage):
    """Save an incoming upload to a temporary file for the duration of the block.

    The staged file is removed on every exit path, including errors raised
    by the block.
    """
    staging_dir = current_app.config["UPLOAD_STAGING_DIR"]
    os.makedirs(staging_dir, exist_ok=True)
    fd, path = tempfile.mkstemp(dir=staging_dir, prefix="upload-")
    os.close(fd)
    try:
        file_storage.save(path)
        yield path
    finally:
        with suppress(FileNotFoundError):
            os.remove(path)


def _ensure_bucket(minio, bucket: str) -> None:
    if not current_app.config.get("MINIO_AUTO_CREATE_BUCKET", True):
        return
    if not minio.bucket_exists(bucket_name=bucket):
        minio.make_bucket(bucket_name=bucket)
        logger.info("storage_bucket_created bucket=%s", bucket)


def upload_file(path: str, object_name: str, content_type: str | None = None) -> str:
    bucket = current_app.config["MINIO_BUCKET"]
    try:
        minio = get_minio_client()
        _ensure_bucket(minio, bucket)
        minio.fput_object(
            bucket_name=bucket,
            object_name=object_name,
            file_path=path,
            content_type=content_type or "application/octet-stream",
        )
    except Exception as e:
        logger.exception("storage_upload_failed bucket=%s object=%s", bucket, object_name)
        raise StorageError() from e

    logger.info("storage_upload_completed bucket=%s object=%s", bucket, object_name)
    return object_name


def delete_object(object_name: str) -> None:
    bucket = current_app.config["MINIO_BUCKET"]
    try:
        get_minio_client().remove_object(
            bucket_name=bucket,
            object_name=object_name,
        )
    except Exception as e:
        raise StorageError() from e

    logger.info("storage_object_removed bucket=%s object=%s", bucket, object_name)
