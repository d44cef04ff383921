from __future__ import annotations

import asyncio

import httpx

from .config import load_settings
from .core.storage import load_teams
from .logging_config import setup_logging
from .plugins import build_plugins
from .report import ChangeReporter
from .runner import run_pass


def main() -> int:
    settings = load_settings()
    log = setup_logging(settings.log_level)
    if "slack" in settings.plugins and not settings.slack_token:
        log.error("SLACK_TOKEN is not set. Export it in your environment before running.")
        return 2
    if not settings.people_path and not (settings.permissions_org and settings.permissions_repo):
        log.error(
            "Either PEOPLE_PATH or PERMISSIONS_FILE_ORG and PERMISSIONS_FILE_REPO must be set."
        )
        return 2

    teams = load_teams(settings.teams_path)
    reporter = ChangeReporter(dry_run=settings.dry_run)
    if settings.dry_run:
        log.info("Dry run: no changes will be applied")

    async def runner():
        async with httpx.AsyncClient() as client:
            plugins = build_plugins(settings, client)
            return await run_pass(teams, plugins, reporter)

    summary = asyncio.run(runner())
    log.info("%s", reporter.render())
    return 0 if summary.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
