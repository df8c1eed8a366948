"""
Blob storage backends.

- AzureBlobStorage: Azure Blob Storage via azure-storage-blob
- LocalBlobStorage: files under LOCAL_STORAGE_DIR/<container>/<blob name>,
  for development without a storage account

Both expose upload(container, blob_name, data, content_type, metadata) and
return a URL (or path) for the stored object. Uploads are attempted once.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Set

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContentSettings

from config.settings import settings
from utils.exceptions import StorageUnavailable, ValidationError

logger = logging.getLogger(__name__)


def is_safe_folder_name(value: str) -> bool:
    """True when value can be used as a single blob folder segment."""
    return bool(value) and value not in (".", "..") and not any(c in value for c in "/\\\0")


class BlobStorage(Protocol):
    def upload(
        self,
        container: str,
        blob_name: str,
        data: bytes,
        content_type: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        ...


class AzureBlobStorage:
    """Azure Blob Storage backend. Containers are created on first use."""

    def __init__(self, connection_string: Optional[str] = None):
        connection_string = connection_string or settings.AZURE_STORAGE_CONNECTION_STRING
        if not connection_string:
            raise StorageUnavailable("Blob storage is not configured")

        self.service_client = BlobServiceClient.from_connection_string(connection_string)
        self._ready_containers: Set[str] = set()

    def _ensure_container(self, container: str):
        container_client = self.service_client.get_container_client(container)
        if container in self._ready_containers:
            return container_client
        try:
            container_client.create_container()
            logger.info(f"[Blob] Container \"{container}\" created.")
        except ResourceExistsError:
            pass
        self._ready_containers.add(container)
        return container_client

    def upload(
        self,
        container: str,
        blob_name: str,
        data: bytes,
        content_type: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        try:
            container_client = self._ensure_container(container)
            blob_client = container_client.get_blob_client(blob_name)
            blob_client.upload_blob(
                data,
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
                metadata=metadata,
                timeout=int(settings.UPSTREAM_TIMEOUT_SECONDS),
            )
        except AzureError as e:
            logger.error(f"[Blob] Upload error for {container}/{blob_name}: {e}")
            raise StorageUnavailable("Blob upload failed") from e

        logger.info(f"[Blob] Uploaded {container}/{blob_name} ({len(data)} bytes)")
        return blob_client.url


class LocalBlobStorage:
    """Directory-backed storage; metadata is not persisted."""

    def __init__(self, root: Optional[str] = None):
        self.root = Path(root or settings.LOCAL_STORAGE_DIR)

    def upload(
        self,
        container: str,
        blob_name: str,
        data: bytes,
        content_type: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        base = (self.root / container).resolve()
        target = (base / blob_name).resolve()
        if base not in target.parents:
            logger.error(f"[Local] Rejected blob name outside {base}: {blob_name}")
            raise ValidationError("Invalid blob name")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.error(f"[Local] Write error for {target}: {e}")
            raise StorageUnavailable("Blob upload failed") from e

        logger.info(f"[Local] Wrote {target} ({len(data)} bytes)")
        return str(target)


def get_blob_storage() -> BlobStorage:
    """Build the backend selected by STORAGE_BACKEND."""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "local":
        return LocalBlobStorage()
    if backend == "azure":
        return AzureBlobStorage()
    raise ValueError(f"Unsupported storage backend: {settings.STORAGE_BACKEND}")
