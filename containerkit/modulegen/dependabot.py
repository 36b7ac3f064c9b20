"""Reading and updating the dependabot configuration of the repository."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from containerkit.modulegen.example import Example

UPDATE_SCHEDULE = "monthly"


@dataclass
class Schedule:
    """How often dependabot checks for updates."""

    interval: str = ""


@dataclass
class Update:
    """One dependabot update entry."""

    package_ecosystem: str = ""
    directory: str = ""
    schedule: Schedule = field(default_factory=Schedule)
    open_pull_requests_limit: int = 0
    rebase_strategy: str = ""


def _update_from_dict(data: dict[str, Any]) -> Update:
    schedule = data.get("schedule") or {}
    return Update(
        package_ecosystem=data.get("package-ecosystem", ""),
        directory=data.get("directory", ""),
        schedule=Schedule(interval=schedule.get("interval", "")),
        open_pull_requests_limit=int(data.get("open-pull-requests-limit", 0)),
        rebase_strategy=data.get("rebase-strategy", ""),
    )


def _update_to_dict(update: Update) -> dict[str, Any]:
    return {
        "package-ecosystem": update.package_ecosystem,
        "directory": update.directory,
        "schedule": {"interval": update.schedule.interval},
        "open-pull-requests-limit": update.open_pull_requests_limit,
        "rebase-strategy": update.rebase_strategy,
    }


@dataclass
class DependabotConfig:
    """The dependabot configuration file."""

    version: int = 0
    updates: list[Update] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DependabotConfig:
        """Build a configuration from its YAML document."""
        data = data or {}
        return cls(
            version=int(data.get("version", 0)),
            updates=[_update_from_dict(item) for item in data.get("updates") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the YAML document for this configuration."""
        return {
            "version": self.version,
            "updates": [_update_to_dict(update) for update in self.updates],
        }


def new_update(example: Example) -> Update:
    """Return the update entry for a generated module or example."""
    return Update(
        directory="/" + example.parent_dir() + "/" + example.lower(),
        open_pull_requests_limit=3,
        package_ecosystem="gomod",
        rebase_strategy="disabled",
        schedule=Schedule(interval=UPDATE_SCHEDULE),
    )


def get_dependabot_config_file(root_dir: str | os.PathLike[str]) -> str:
    """Return the path of the dependabot configuration below ``root_dir``."""
    return os.path.join(os.fspath(root_dir), ".github", "dependabot.yml")


def read_dependabot_config(root_dir: str | os.PathLike[str]) -> DependabotConfig:
    """Read the dependabot configuration below ``root_dir``."""
    with open(get_dependabot_config_file(root_dir), encoding="utf-8") as handle:
        return DependabotConfig.from_dict(yaml.safe_load(handle))


def write_dependabot_config(
    root_dir: str | os.PathLike[str], config: DependabotConfig
) -> None:
    """Write the dependabot configuration below ``root_dir``."""
    text = yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
    with open(get_dependabot_config_file(root_dir), "w", encoding="utf-8") as handle:
        handle.write(text)


def generate_dependabot_updates(root_dir: str | os.PathLike[str], example: Example) -> None:
    """Add the example's update entry, keeping the first entry first and the rest sorted.

    Raises ``ValueError`` when the configuration has no updates at all.
    """
    config = read_dependabot_config(root_dir)
    if not config.updates:
        raise ValueError("dependabot configuration has no updates")

    others = [update for update in config.updates if update.directory != "/"]
    others.append(new_update(example))
    others.sort(key=lambda update: update.directory)

    config.updates = [config.updates[0], *others]
    write_dependabot_config(root_dir, config)