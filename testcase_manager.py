"""
testcase_manager.py – Find-or-create for test cases inside one folder.

Test cases are matched on their exact title; titles are only expected to
be unique within a folder.
"""

from __future__ import annotations

import logging

import requests

from errors import TestCaseCreationError
from existing_policy import ExistingTestCasePolicy
from models import RemoteTestCase, SyncResult
from payload_builder import PayloadBuilder
from tm_client import TestManagementClient

logger = logging.getLogger("feature-sync")


class TestCaseManager:
    """Creates missing test cases and hands existing ones to the policy."""

    __test__ = False

    def __init__(
        self,
        client: TestManagementClient,
        existing_policy: ExistingTestCasePolicy,
        result: SyncResult | None = None,
    ) -> None:
        self._client = client
        self._existing_policy = existing_policy
        self._result = result if result is not None else SyncResult()

    def find_test_case(self, folder_id: int, title: str) -> RemoteTestCase | None:
        """Return the test case titled *title* in *folder_id*, if any."""
        data = self._client.list_test_cases(folder_id)
        for item in data.get("test_cases") or []:
            if item.get("title") == title:
                existing = RemoteTestCase.from_api(item)
                if existing.folder_id is None:
                    existing.folder_id = folder_id
                return existing
        return None

    def resolve_test_case(
        self, folder_id: int, scenario_name: str, builder: PayloadBuilder
    ) -> None:
        try:
            existing = self.find_test_case(folder_id, scenario_name)
            if existing is not None:
                logger.info(
                    "Test case '%s' already exists with ID: %s",
                    scenario_name,
                    existing.identifier,
                )
                self._existing_policy.handle_existing(existing, scenario_name, builder)
                return

            logger.info(
                "Creating new test case '%s' in folder ID: %s", scenario_name, folder_id
            )
            data = self._client.create_test_case(folder_id, builder.for_folder(folder_id))
        except requests.RequestException as exc:
            logger.error("Error resolving test case '%s': %s", scenario_name, exc)
            raise

        created = (data.get("data") or {}).get("test_case")
        if not created:
            logger.error("Create call for '%s' returned no test case.", scenario_name)
            raise TestCaseCreationError(scenario_name, folder_id)

        logger.info(
            "Test case '%s' created successfully with ID: %s",
            scenario_name,
            created["identifier"],
        )
        self._result.created_ids.append(created["identifier"])
