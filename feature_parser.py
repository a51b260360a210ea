"""
feature_parser.py – Reads a `.feature` file into a `Document`.

Parsing itself is done by the official Cucumber parser (`gherkin-official`);
this module only maps its AST onto our data-classes.  Scenarios nested in
`Rule:` blocks are flattened into the feature's scenario list.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from gherkin.parser import Parser
from gherkin.token_scanner import TokenScanner

from models import Document, Scenario, Step

logger = logging.getLogger("feature-sync")

FEATURE_EXTENSION = ".feature"


def _iter_scenarios(children: list[dict[str, Any]]) -> Iterator[dict[str, Any]]:
    for child in children:
        if "scenario" in child:
            yield child["scenario"]
        elif "rule" in child:
            yield from _iter_scenarios(child["rule"].get("children", []))


def _to_scenario(node: dict[str, Any]) -> Scenario:
    return Scenario(
        name=node.get("name", ""),
        steps=[
            Step(keyword=step.get("keyword", ""), text=step.get("text", ""))
            for step in node.get("steps", [])
        ],
    )


def parse_feature_text(text: str, path: str = "<string>") -> Document | None:
    """Parse Gherkin *text*; return None when it holds no feature."""
    ast = Parser().parse(TokenScanner(text))
    feature = ast.get("feature")
    if not feature:
        return None
    return Document(
        name=feature.get("name", ""),
        path=path,
        scenarios=[_to_scenario(node) for node in _iter_scenarios(feature.get("children", []))],
    )


def parse_feature_file(path: str) -> Document | None:
    """Parse the feature file at *path*."""
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    document = parse_feature_text(text, path)
    if document is not None:
        logger.debug(
            "Parsed feature '%s' (%d scenario(s)) from %s",
            document.name,
            len(document.scenarios),
            path,
        )
    return document
