"""
errors.py – Exception hierarchy raised by the sync engine.

Transport failures are not wrapped: they surface as the
`requests.RequestException` raised by the HTTP client.
"""

from __future__ import annotations


class SyncError(Exception):
    """Base class for every error raised by Feature-Sync itself."""


class ConfigurationError(SyncError):
    """Raised when settings are missing or hold an unsupported value."""


class FolderCreationError(SyncError):
    """The catalog accepted a folder create call but returned no folder."""

    def __init__(self, name: str, parent_id: int | None = None) -> None:
        where = f" under folder {parent_id}" if parent_id is not None else ""
        super().__init__(f"Failed to create folder '{name}'{where}")
        self.name = name
        self.parent_id = parent_id


class TestCaseCreationError(SyncError):
    """A create call returned no test case."""

    __test__ = False

    def __init__(self, name: str, folder_id: int) -> None:
        super().__init__(
            f"Failed to create test case '{name}' in folder {folder_id}"
        )
        self.name = name
        self.folder_id = folder_id


class TestCaseRecreationError(SyncError):
    """A delete-and-recreate could not be completed.

    With *deleted* set the previous test case is already gone; nothing is
    rolled back.
    """

    __test__ = False

    def __init__(
        self, name: str, folder_id: int | None, deleted: bool = True
    ) -> None:
        state = (
            "the previous version has already been deleted"
            if deleted
            else "the existing test case was left in place"
        )
        super().__init__(
            f"Failed to recreate test case '{name}' in folder {folder_id} ({state})"
        )
        self.name = name
        self.folder_id = folder_id
        self.deleted = deleted
