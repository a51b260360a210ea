"""
payload_builder.py – Turns a parsed scenario into a test-case payload.

Two shapes are supported, selected by `TestCaseTemplate`:

  • steps – a structured list of {step, result} rows
  • bdd   – the scenario as a single Gherkin narrative
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from models import Scenario, TestCaseTemplate


def _description(feature_name: str, scenario_name: str) -> str:
    return f"<p>{feature_name} > {scenario_name}</p>"


def _steps_payload(
    scenario: Scenario, feature_name: str, background: str
) -> dict[str, Any]:
    return {
        "name": scenario.name,
        "template": TestCaseTemplate.STEPS.tag,
        "description": _description(feature_name, scenario.name),
        "preconditions": background,
        "test_case_steps": [
            {"step": f"{step.keyword}{step.text}", "result": ""}
            for step in scenario.steps
        ],
    }


def _bdd_payload(
    scenario: Scenario, feature_name: str, background: str
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": scenario.name,
        "template": TestCaseTemplate.BDD.tag,
        "feature": feature_name,
        "background": background,
        "description": _description(feature_name, scenario.name),
        "scenario": "\n".join(
            f"\t{step.keyword}{step.text}" for step in scenario.steps
        ),
    }
    # Omitted, never blank, when there is no background.
    if background:
        body["preconditions"] = f"Background: {background}"
    return body


def build_payload(
    scenario: Scenario,
    feature_name: str,
    background: str,
    template: TestCaseTemplate,
) -> dict[str, Any]:
    """Return the request body creating or updating *scenario*."""
    if template is TestCaseTemplate.STEPS:
        body = _steps_payload(scenario, feature_name, background)
    else:
        body = _bdd_payload(scenario, feature_name, background)
    return {"test_case": body}


@dataclass(frozen=True)
class PayloadBuilder:
    """Deferred payload for one scenario.

    Creation and update are separate entry points: creation is told which
    folder the test case will live in, update is not.
    """

    scenario: Scenario
    feature_name: str
    background: str
    template: TestCaseTemplate

    def for_folder(self, folder_id: int | None) -> dict[str, Any]:
        """Payload for creating the test case inside *folder_id*."""
        return build_payload(
            self.scenario, self.feature_name, self.background, self.template
        )

    def for_update(self) -> dict[str, Any]:
        """Payload for patching an existing test case in place."""
        return build_payload(
            self.scenario, self.feature_name, self.background, self.template
        )
