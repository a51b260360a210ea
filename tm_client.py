"""
tm_client.py – All BrowserStack Test Management REST interactions.

One method per endpoint.  Every call goes through a shared, basic-auth
`requests.Session`; HTTP errors are raised via `raise_for_status()` and
left for the caller to log and propagate.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from config import Settings

logger = logging.getLogger("feature-sync")


class TestManagementClient:
    """Thin wrapper over the folders / test-cases endpoints of one project."""

    __test__ = False

    def __init__(
        self,
        username: str | None = None,
        access_key: str | None = None,
        project_id: str | None = None,
        base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._session.auth = (
            username if username is not None else Settings.BROWSERSTACK_USERNAME,
            access_key if access_key is not None else Settings.BROWSERSTACK_ACCESS_KEY,
        )
        self._project = project_id or Settings.BROWSERSTACK_PROJECT_ID
        base = (base_url or Settings.API_BASE_URL).rstrip("/")
        self._base = f"{base}/projects/{self._project}"

    # ── Plumbing ────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self._base}{path}"
        logger.debug("%s %s", method, url)
        resp = self._session.request(method, url, **kwargs)
        resp.raise_for_status()
        if not resp.content:
            return {}
        return resp.json()

    # ── Folders ─────────────────────────────────────────────────────────

    def list_folders(
        self, parent_id: int | None = None, page: int = 1
    ) -> dict[str, Any]:
        """Return one page of folders under *parent_id* (root if None)."""
        if parent_id is None:
            path = "/folders"
        else:
            path = f"/folders/{parent_id}/sub-folders"
        return self._request("GET", path, params={"p": page})

    def create_folder(
        self, name: str, description: str, parent_id: int | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name, "description": description}
        if parent_id is not None:
            body["parent_id"] = parent_id
        return self._request("POST", "/folders", json={"folder": body})

    # ── Test cases ──────────────────────────────────────────────────────

    def list_test_cases(self, folder_id: int) -> dict[str, Any]:
        """Return every test case in *folder_id* (single, unpaginated call)."""
        return self._request("GET", "/test-cases", params={"folder_id": folder_id})

    def create_test_case(
        self, folder_id: int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return self._request("POST", f"/folders/{folder_id}/test-cases", json=payload)

    def update_test_case(
        self, identifier: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return self._request("PATCH", f"/test-cases/{identifier}", json=payload)

    def delete_test_case(self, identifier: str) -> dict[str, Any]:
        return self._request("DELETE", f"/test-cases/{identifier}")
