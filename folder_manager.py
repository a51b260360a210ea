"""
folder_manager.py – Resolves folder names to catalog folder IDs.

The catalog does not enforce unique (name, parent) pairs, so a folder is
only created after a full listing of its would-be siblings came back
without it.  Freshly created folders take a while to show up in that
listing; `ensure_folder` therefore sleeps for the configured settling
delay after every creation.
"""

from __future__ import annotations

import logging
import time

import requests

from errors import FolderCreationError
from models import RemoteFolder, SyncResult
from tm_client import TestManagementClient

logger = logging.getLogger("feature-sync")


class FolderManager:
    """Find-or-create folders, one blocking call at a time."""

    def __init__(
        self,
        client: TestManagementClient,
        creation_delay_ms: int = 0,
        result: SyncResult | None = None,
    ) -> None:
        self._client = client
        self._delay_ms = creation_delay_ms
        self._result = result if result is not None else SyncResult()

    def list_folders(self, parent_id: int | None = None) -> list[RemoteFolder]:
        """Return every folder under *parent_id*, following `info.next`."""
        folders: list[RemoteFolder] = []
        page: int | None = 1

        while page:
            data = self._client.list_folders(parent_id, page=page)
            batch = data.get("folders") or []
            if not batch:
                break
            folders.extend(RemoteFolder.from_api(item) for item in batch)
            page = (data.get("info") or {}).get("next")

        logger.debug(
            "Listed %d folder(s) under %s",
            len(folders),
            parent_id if parent_id is not None else "root",
        )
        return folders

    def ensure_folder(
        self,
        name: str,
        parent_id: int | None = None,
        description: str | None = None,
    ) -> int:
        """Return the ID of folder *name* under *parent_id*, creating it if absent."""
        try:
            for folder in self.list_folders(parent_id):
                if folder.name == name and folder.parent_id == parent_id:
                    logger.info(
                        "Folder '%s' already exists with ID: %s", name, folder.id
                    )
                    self._result.reused_folder_ids.append(folder.id)
                    return folder.id

            data = self._client.create_folder(
                name,
                description or f"Folder for feature: {name}",
                parent_id=parent_id,
            )
        except requests.RequestException as exc:
            logger.error("Error resolving folder '%s': %s", name, exc)
            raise

        created = data.get("folder")
        if not created or created.get("id") is None:
            logger.error("Create call for folder '%s' returned no folder.", name)
            raise FolderCreationError(name, parent_id)

        folder_id = created["id"]
        logger.info("Created new folder '%s' with ID: %s", name, folder_id)
        self._result.created_folder_ids.append(folder_id)

        if self._delay_ms:
            logger.info(
                "Waiting %d ms for folder '%s' to become visible…",
                self._delay_ms,
                name,
            )
            time.sleep(self._delay_ms / 1000)
        return folder_id
