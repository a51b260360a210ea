"""
existing_policy.py – Decides what happens to a test case that already exists.

EXISTING_TEST_CASE_OPTION selects one of three branches:

  • skip   – leave the remote test case untouched
  • update – patch it in place, provided its template matches ours
  • delete – delete it and create it again in the same folder

Delete-then-create is not transactional: if the second half fails the
test case is gone, and the error is raised to the caller.
"""

from __future__ import annotations

import logging

import requests

from errors import ConfigurationError, TestCaseRecreationError
from models import ExistingTestCaseOption, RemoteTestCase, SyncPolicy, SyncResult
from payload_builder import PayloadBuilder
from tm_client import TestManagementClient

logger = logging.getLogger("feature-sync")


class ExistingTestCasePolicy:
    """Apply the configured skip / update / delete policy."""

    def __init__(
        self,
        client: TestManagementClient,
        policy: SyncPolicy,
        result: SyncResult | None = None,
    ) -> None:
        self._client = client
        self._policy = policy
        self._result = result if result is not None else SyncResult()

    def handle_existing(
        self,
        existing: RemoteTestCase,
        scenario_name: str,
        builder: PayloadBuilder,
    ) -> None:
        option = self._policy.existing_test_case_option

        if option is ExistingTestCaseOption.SKIP:
            logger.info("Skipping upload for existing test case: %s", scenario_name)
            self._result.skipped_count += 1
            return

        if option is ExistingTestCaseOption.UPDATE:
            self._update(existing, scenario_name, builder)
            return

        if option is ExistingTestCaseOption.DELETE:
            self._recreate(existing, scenario_name, builder)
            return

        raise ConfigurationError(f"Unsupported existing test case option: {option!r}")

    # ── Branches ────────────────────────────────────────────────────────

    def _update(
        self,
        existing: RemoteTestCase,
        scenario_name: str,
        builder: PayloadBuilder,
    ) -> None:
        expected = self._policy.test_case_template.tag
        if existing.template != expected:
            logger.warning(
                "Template mismatch for test case '%s'. Expected: '%s', "
                "Found: '%s'. Skipping update.",
                scenario_name,
                expected,
                existing.template,
            )
            self._result.mismatched_count += 1
            return

        logger.info("Updating existing test case: %s", scenario_name)
        try:
            self._client.update_test_case(existing.identifier, builder.for_update())
        except requests.RequestException as exc:
            logger.error("Error updating test case %s: %s", existing.identifier, exc)
            raise
        logger.info("Test case updated successfully: %s", existing.identifier)
        self._result.updated_ids.append(existing.identifier)

    def _recreate(
        self,
        existing: RemoteTestCase,
        scenario_name: str,
        builder: PayloadBuilder,
    ) -> None:
        folder_id = existing.folder_id
        if folder_id is None:
            logger.error(
                "Test case '%s' (%s) has no folder; not deleting it.",
                scenario_name,
                existing.identifier,
            )
            raise TestCaseRecreationError(scenario_name, folder_id, deleted=False)

        logger.info("Deleting and recreating test case: %s", scenario_name)
        try:
            self._client.delete_test_case(existing.identifier)
            logger.info("Test case deleted successfully: %s", existing.identifier)
            data = self._client.create_test_case(
                folder_id, builder.for_folder(folder_id)
            )
        except requests.RequestException as exc:
            logger.error(
                "Error recreating test case '%s' (%s): %s",
                scenario_name,
                existing.identifier,
                exc,
            )
            raise

        created = (data.get("data") or {}).get("test_case")
        if not created:
            logger.error(
                "Test case '%s' was deleted but not recreated.", scenario_name
            )
            raise TestCaseRecreationError(scenario_name, folder_id)

        logger.info(
            "Test case '%s' recreated successfully with ID: %s",
            scenario_name,
            created["identifier"],
        )
        self._result.recreated_ids.append(created["identifier"])
