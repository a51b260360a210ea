"""
models.py – Plain data-classes shared across every module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ExistingTestCaseOption(str, Enum):
    """What to do with a test case whose title already exists in the folder."""

    SKIP = "skip"
    UPDATE = "update"
    DELETE = "delete"


class TestCaseTemplate(str, Enum):
    """Shape of the payload sent to the catalog."""

    __test__ = False

    BDD = "bdd"
    STEPS = "steps"

    @property
    def tag(self) -> str:
        """Template identifier as stored on the remote test case."""
        return "test_case_bdd" if self is TestCaseTemplate.BDD else "test_case_steps"


# ── Local side (parsed .feature files) ─────────────────────────────────

@dataclass(frozen=True)
class Step:
    """A single Gherkin step; *keyword* keeps its trailing space."""

    keyword: str
    text: str


@dataclass
class Scenario:
    """One scenario of a feature file."""

    name: str
    steps: list[Step] = field(default_factory=list)

    @property
    def background(self) -> str:
        """Text of the steps flagged as background, one per line."""
        return "\n".join(
            step.text for step in self.steps if step.keyword.strip() == "Background"
        )


@dataclass
class Document:
    """A parsed feature file."""

    name: str
    path: str
    scenarios: list[Scenario] = field(default_factory=list)


# ── Remote side (test-management catalog) ─────────────────────────────

@dataclass
class RemoteFolder:
    """A folder as listed by the catalog."""

    id: int
    name: str
    parent_id: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> RemoteFolder:
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            parent_id=data.get("parent_id"),
        )


@dataclass
class RemoteTestCase:
    """A test case as listed by the catalog."""

    identifier: str
    title: str
    template: str = ""
    folder_id: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> RemoteTestCase:
        return cls(
            identifier=data["identifier"],
            title=data.get("title", ""),
            template=data.get("template", ""),
            folder_id=data.get("folder_id"),
        )


# ── Run configuration and summary ──────────────────────────────────────

@dataclass(frozen=True)
class SyncPolicy:
    """Behaviour switches, resolved once per run."""

    existing_test_case_option: ExistingTestCaseOption = ExistingTestCaseOption.SKIP
    test_case_template: TestCaseTemplate = TestCaseTemplate.BDD
    preserve_directory_structure: bool = False
    folder_creation_delay_ms: int = 10_000


@dataclass
class SyncResult:
    """Summary returned after a full walk."""

    documents_processed: int = 0
    created_folder_ids: list[int] = field(default_factory=list)
    reused_folder_ids: list[int] = field(default_factory=list)
    created_ids: list[str] = field(default_factory=list)
    updated_ids: list[str] = field(default_factory=list)
    recreated_ids: list[str] = field(default_factory=list)
    skipped_count: int = 0
    mismatched_count: int = 0
