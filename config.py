"""
config.py – Centralised configuration loaded from environment variables.
"""

import os

from dotenv import load_dotenv

from errors import ConfigurationError
from models import ExistingTestCaseOption, SyncPolicy, TestCaseTemplate

load_dotenv()

DEFAULT_API_BASE_URL = "https://test-management.browserstack.com/api/v2"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid {name}='{raw}'. Use one of: true, false, yes, no, 1, 0."
    )


def _parse_delay(raw: str) -> int:
    try:
        delay = int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Invalid FOLDER_CREATION_DELAY='{raw}'. Expected milliseconds as an integer."
        ) from None
    if delay < 0:
        raise ConfigurationError(
            f"Invalid FOLDER_CREATION_DELAY={delay}. Must be zero or positive."
        )
    return delay


def _parse_choice(name: str, raw: str, enum_cls):
    value = raw.strip().lower()
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"Invalid {name}='{raw}'. Valid options: {valid}"
        ) from None


class Settings:
    """Validated, read-only application settings."""

    # ── BrowserStack Test Management ────────────────────────
    BROWSERSTACK_USERNAME: str = os.getenv("BROWSERSTACK_USERNAME", "")
    BROWSERSTACK_ACCESS_KEY: str = os.getenv("BROWSERSTACK_ACCESS_KEY", "")
    BROWSERSTACK_PROJECT_ID: str = os.getenv("BROWSERSTACK_PROJECT_ID", "")
    API_BASE_URL: str = (
        os.getenv("BROWSERSTACK_API_BASE_URL", "") or DEFAULT_API_BASE_URL
    ).rstrip("/")

    # ── Input ───────────────────────────────────────────────
    FEATURES_DIR: str = os.getenv("FEATURES_DIR", "features")

    # ── Behaviour ───────────────────────────────────────────
    FOLDER_CREATION_DELAY: str = os.getenv("FOLDER_CREATION_DELAY", "10000")
    PRESERVE_DIRECTORY_STRUCTURE: str = os.getenv("PRESERVE_DIRECTORY_STRUCTURE", "false")
    EXISTING_TEST_CASE_OPTION: str = os.getenv("EXISTING_TEST_CASE_OPTION", "skip")
    TEST_CASE_TEMPLATE: str = os.getenv("TEST_CASE_TEMPLATE", "bdd")

    @classmethod
    def validate(cls) -> None:
        """Fail early if required values are missing."""
        missing: list[str] = []
        if not cls.BROWSERSTACK_USERNAME:
            missing.append("BROWSERSTACK_USERNAME")
        if not cls.BROWSERSTACK_ACCESS_KEY:
            missing.append("BROWSERSTACK_ACCESS_KEY")
        if not cls.BROWSERSTACK_PROJECT_ID:
            missing.append("BROWSERSTACK_PROJECT_ID")

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                "  → Copy .env.example to .env and fill in all values."
            )

    @classmethod
    def sync_policy(cls) -> SyncPolicy:
        """Resolve the behaviour switches into a validated `SyncPolicy`.

        Every enum and number is checked here, so a bad value stops the
        run before the first remote call instead of halfway through.
        """
        return SyncPolicy(
            existing_test_case_option=_parse_choice(
                "EXISTING_TEST_CASE_OPTION",
                cls.EXISTING_TEST_CASE_OPTION,
                ExistingTestCaseOption,
            ),
            test_case_template=_parse_choice(
                "TEST_CASE_TEMPLATE", cls.TEST_CASE_TEMPLATE, TestCaseTemplate
            ),
            preserve_directory_structure=_parse_bool(
                "PRESERVE_DIRECTORY_STRUCTURE", cls.PRESERVE_DIRECTORY_STRUCTURE
            ),
            folder_creation_delay_ms=_parse_delay(cls.FOLDER_CREATION_DELAY),
        )
