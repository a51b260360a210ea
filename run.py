#!/usr/bin/env python3
"""
run.py – CLI entry-point for Feature-Sync.

Usage:
    python run.py                     # syncs $FEATURES_DIR (default ./features)
    python run.py path/to/features
    python run.py path/to/features -v
"""

from __future__ import annotations

import argparse
import logging
import sys

import requests
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from config import Settings
from errors import SyncError
from existing_policy import ExistingTestCasePolicy
from folder_manager import FolderManager
from models import SyncPolicy, SyncResult
from testcase_manager import TestCaseManager
from tm_client import TestManagementClient
from tree_walker import TreeWalker

console = Console()

# ── Logging ─────────────────────────────────────────────────────────────

def _configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )


# ── Pretty output helpers ──────────────────────────────────────────────

def _show_policy(policy: SyncPolicy, features_dir: str) -> None:
    console.print(
        Panel(
            f"[dim]Features:[/]  {features_dir}\n"
            f"[dim]Project:[/]   {Settings.BROWSERSTACK_PROJECT_ID}\n"
            f"[dim]Template:[/]  {policy.test_case_template.value}  |  "
            f"[dim]Existing:[/] {policy.existing_test_case_option.value}  |  "
            f"[dim]Mirror dirs:[/] {'yes' if policy.preserve_directory_structure else 'no'}  |  "
            f"[dim]Folder delay:[/] {policy.folder_creation_delay_ms} ms",
            title="Sync Policy",
            border_style="blue",
        )
    )


def _show_results(result: SyncResult) -> None:
    console.print()
    console.print(
        Panel(
            f"[blue bold]Features:[/]   {result.documents_processed}\n"
            f"[blue bold]Folders:[/]    {len(result.created_folder_ids)} created, "
            f"{len(result.reused_folder_ids)} reused\n"
            f"[green bold]Created:[/]    {len(result.created_ids)}  →  {result.created_ids or '—'}\n"
            f"[yellow bold]Updated:[/]    {len(result.updated_ids)}  →  {result.updated_ids or '—'}\n"
            f"[magenta bold]Recreated:[/]  {len(result.recreated_ids)}  →  {result.recreated_ids or '—'}\n"
            f"[dim]Skipped:[/]    {result.skipped_count}"
            + (
                f"\n[red]Template mismatches:[/] {result.mismatched_count}"
                if result.mismatched_count
                else ""
            ),
            title="Sync Summary",
            border_style="green",
        )
    )


# ── Core orchestration ─────────────────────────────────────────────────

def run(
    features_dir: str,
    policy: SyncPolicy,
    client: TestManagementClient | None = None,
) -> SyncResult:
    """Walk *features_dir* and push every scenario to the catalog."""
    result = SyncResult()
    client = client or TestManagementClient()

    folders = FolderManager(client, policy.folder_creation_delay_ms, result)
    existing_policy = ExistingTestCasePolicy(client, policy, result)
    test_cases = TestCaseManager(client, existing_policy, result)
    walker = TreeWalker(folders, test_cases, policy, result=result)

    console.rule("[bold blue]Sync Feature Files")
    walker.walk(features_dir)

    _show_results(result)
    return result


# ── CLI ─────────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="feature-sync",
        description="Sync Gherkin feature files into BrowserStack Test Management.",
    )
    parser.add_argument(
        "features_dir",
        nargs="?",
        default=Settings.FEATURES_DIR,
        help="Directory containing .feature files (default: $FEATURES_DIR or ./features).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    console.print(
        Panel(
            "[bold white]Feature-Sync[/]  –  Gherkin → Test Management",
            border_style="bright_magenta",
        )
    )

    try:
        Settings.validate()
        policy = Settings.sync_policy()
    except SyncError as exc:
        console.print(f"[red bold]Configuration error:[/] {exc}")
        sys.exit(1)

    _show_policy(policy, args.features_dir)

    try:
        run(args.features_dir, policy)
    except KeyboardInterrupt:
        console.print("\n[red]Aborted by user.[/]")
        sys.exit(130)
    except (SyncError, requests.RequestException, OSError) as exc:
        console.print(f"\n[red bold]Error processing feature files:[/] {exc}")
        logging.getLogger("feature-sync").debug("Traceback:", exc_info=True)
        sys.exit(1)

    console.print("[green]Feature files processed successfully.[/]")


if __name__ == "__main__":
    main()
