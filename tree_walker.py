"""
tree_walker.py – Walks a directory of feature files and syncs each one.

Every `.feature` file gets its own folder, named after the file.  With
PRESERVE_DIRECTORY_STRUCTURE enabled, each sub-directory is mirrored as a
folder too, and file folders are nested under it:

  features/                      (catalog root)
  ├─ auth/                   →   ├─ auth
  │  └─ login.feature        →   │  └─ login.feature  (test cases…)
  └─ search.feature          →   └─ search.feature    (test cases…)

Without it, all file folders land directly under the root.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from gherkin.errors import ParserError

from feature_parser import FEATURE_EXTENSION, parse_feature_file
from folder_manager import FolderManager
from models import Document, SyncPolicy, SyncResult
from payload_builder import PayloadBuilder
from testcase_manager import TestCaseManager

logger = logging.getLogger("feature-sync")


class TreeWalker:
    """Depth-first, strictly sequential sync of a local feature tree."""

    def __init__(
        self,
        folders: FolderManager,
        test_cases: TestCaseManager,
        policy: SyncPolicy,
        parser: Callable[[str], Document | None] = parse_feature_file,
        result: SyncResult | None = None,
    ) -> None:
        self._folders = folders
        self._test_cases = test_cases
        self._policy = policy
        self._parse = parser
        self._result = result if result is not None else SyncResult()

    def walk(self, root_path: str, parent_id: int | None = None) -> None:
        """Sync everything under *root_path* into folder *parent_id* (root if None)."""
        # Unsorted: folders and test cases are matched by name.
        for entry in os.listdir(root_path):
            full_path = os.path.join(root_path, entry)
            logger.debug("Processing: %s", full_path)

            if os.path.isdir(full_path):
                child_parent = parent_id
                if self._policy.preserve_directory_structure:
                    child_parent = self._folders.ensure_folder(
                        entry,
                        parent_id,
                        description=f"Folder for directory: {entry}",
                    )
                self.walk(full_path, child_parent)
            elif entry.endswith(FEATURE_EXTENSION):
                self.process_feature_file(full_path, parent_id)

    def process_feature_file(self, path: str, parent_id: int | None = None) -> None:
        try:
            document = self._parse(path)
        except ParserError as exc:
            logger.error("Could not parse %s; skipping.\n%s", path, exc)
            return

        if document is None:
            logger.warning("No feature found in %s; skipping.", path)
            return

        logger.info("Feature: %s (%s)", document.name, path)
        folder_id = self._folders.ensure_folder(os.path.basename(path), parent_id)

        for scenario in document.scenarios:
            logger.info("Uploading scenario: %s", scenario.name)
            builder = PayloadBuilder(
                scenario=scenario,
                feature_name=document.name,
                background=scenario.background,
                template=self._policy.test_case_template,
            )
            self._test_cases.resolve_test_case(folder_id, scenario.name, builder)

        self._result.documents_processed += 1
