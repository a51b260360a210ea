"""In-memory stand-in for `TestManagementClient`.

Mirrors the catalog's observable behaviour: paginated folder listings
scoped by parent, unpaginated per-folder test-case listings, and the
response envelopes of the create endpoints.
"""

from __future__ import annotations

import copy
from typing import Any

MUTATING = {"create_folder", "create_test_case", "update_test_case", "delete_test_case"}


class FakeCatalog:
    """Records every call in ``calls`` as ``(method, *args)`` tuples."""

    def __init__(self, page_size: int = 2) -> None:
        self.page_size = page_size
        self.folders: list[dict[str, Any]] = []
        self.test_cases: list[dict[str, Any]] = []
        self.calls: list[tuple] = []
        self.descriptions: dict[int, str] = {}
        self._next_folder_id = 100
        self._next_test_case = 1

    # ── Seeding helpers ─────────────────────────────────────────────────

    def add_folder(self, name: str, parent_id: int | None = None) -> int:
        folder_id = self._next_folder_id
        self._next_folder_id += 1
        self.folders.append({"id": folder_id, "name": name, "parent_id": parent_id})
        return folder_id

    def add_test_case(self, title: str, folder_id: int, template: str = "test_case_bdd") -> str:
        identifier = f"TC-{self._next_test_case}"
        self._next_test_case += 1
        self.test_cases.append(
            {
                "identifier": identifier,
                "title": title,
                "template": template,
                "folder_id": folder_id,
            }
        )
        return identifier

    def calls_to(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    def mutations(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in MUTATING]

    # ── Client API ──────────────────────────────────────────────────────

    def list_folders(self, parent_id: int | None = None, page: int = 1) -> dict[str, Any]:
        self.calls.append(("list_folders", parent_id, page))
        siblings = [f for f in self.folders if f["parent_id"] == parent_id]
        start = (page - 1) * self.page_size
        chunk = siblings[start:start + self.page_size]
        has_more = start + self.page_size < len(siblings)
        return {
            "folders": copy.deepcopy(chunk),
            "info": {"next": page + 1 if has_more else None},
        }

    def create_folder(self, name: str, description: str, parent_id: int | None = None) -> dict[str, Any]:
        self.calls.append(("create_folder", name, parent_id))
        folder_id = self.add_folder(name, parent_id)
        self.descriptions[folder_id] = description
        return {"folder": {"id": folder_id, "name": name, "parent_id": parent_id}}

    def list_test_cases(self, folder_id: int) -> dict[str, Any]:
        self.calls.append(("list_test_cases", folder_id))
        return {
            "test_cases": copy.deepcopy(
                [tc for tc in self.test_cases if tc["folder_id"] == folder_id]
            )
        }

    def create_test_case(self, folder_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create_test_case", folder_id, payload))
        body = payload["test_case"]
        identifier = self.add_test_case(body["name"], folder_id, body["template"])
        return {"data": {"test_case": {"identifier": identifier, "title": body["name"]}}}

    def update_test_case(self, identifier: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("update_test_case", identifier, payload))
        return {"data": {"test_case": {"identifier": identifier}}}

    def delete_test_case(self, identifier: str) -> dict[str, Any]:
        self.calls.append(("delete_test_case", identifier))
        self.test_cases = [tc for tc in self.test_cases if tc["identifier"] != identifier]
        return {}
