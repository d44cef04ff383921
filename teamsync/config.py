import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    slack_token: str = ""
    github_token: str = ""
    # Repository holding people.json
    permissions_org: str = ""
    permissions_repo: str = ""
    permissions_ref: str = "main"
    # Local people file, takes precedence over the GitHub repository
    people_path: str = ""
    teams_path: str = "teams.json"
    plugins: tuple[str, ...] = ("slack",)
    dry_run: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    plugins = os.getenv("SYNC_PLUGINS", "slack")
    return Settings(
        slack_token=os.getenv("SLACK_TOKEN", "").strip(),
        github_token=os.getenv("GITHUB_TOKEN", "").strip(),
        permissions_org=os.getenv("PERMISSIONS_FILE_ORG", "").strip(),
        permissions_repo=os.getenv("PERMISSIONS_FILE_REPO", "").strip(),
        permissions_ref=os.getenv("PERMISSIONS_FILE_REF", "").strip() or "main",
        people_path=os.getenv("PEOPLE_PATH", "").strip(),
        teams_path=os.getenv("TEAMS_PATH", "").strip() or "teams.json",
        plugins=tuple(p.strip() for p in plugins.split(",") if p.strip()),
        dry_run=os.getenv("DRY_RUN", "").strip().lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "").strip() or "INFO",
    )
