"""Shared fixtures for the Feature-Sync test suite."""

import logging

import pytest

from models import (
    ExistingTestCaseOption,
    Scenario,
    Step,
    SyncPolicy,
    TestCaseTemplate,
)
from tests.fake_catalog import FakeCatalog

logging.getLogger("feature-sync").setLevel(logging.DEBUG)


@pytest.fixture
def catalog():
    return FakeCatalog(page_size=2)


@pytest.fixture
def login_scenario():
    return Scenario(
        name="Login — success",
        steps=[
            Step("Given ", "a registered user"),
            Step("When ", "they submit valid credentials"),
            Step("Then ", "the dashboard is shown"),
        ],
    )


def make_policy(
    option=ExistingTestCaseOption.SKIP,
    template=TestCaseTemplate.BDD,
    preserve=False,
    delay_ms=0,
):
    return SyncPolicy(
        existing_test_case_option=option,
        test_case_template=template,
        preserve_directory_structure=preserve,
        folder_creation_delay_ms=delay_ms,
    )


LOGIN_FEATURE = """\
Feature: Login

  Scenario: Login — success
    Given a registered user
    When they submit valid credentials
    Then the dashboard is shown

  Scenario: Login — failure
    Given a registered user
    When they submit a wrong password
    Then an error is shown
"""

SEARCH_FEATURE = """\
Feature: Search

  Scenario: Search by keyword
    Given the catalog is loaded
    When I search for "shoes"
    Then results are listed
"""

BROKEN_FEATURE = """\
Feature: Broken

  Scenario: one
    Given ok
  Nonsense here
"""
