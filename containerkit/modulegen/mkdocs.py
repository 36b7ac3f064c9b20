"""Reading and updating the MkDocs site configuration of the repository."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from containerkit.modulegen.example import Example


class _Loader(yaml.SafeLoader):
    """Safe loader that reads values with unknown tags as plain data."""


def _construct_unknown(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node)
    return loader.construct_mapping(node)


_Loader.add_constructor(None, _construct_unknown)

_NAV_KEYS = {True: "Modules", False: "Examples"}


@dataclass
class MkDocsConfig:
    """The MkDocs configuration document."""

    data: dict[str, Any] = field(default_factory=dict)

    def site_name(self) -> str:
        """Return the name of the site."""
        return self.data.get("site_name") or ""

    def latest_version(self) -> str:
        """Return the latest released version recorded in the ``extra`` section."""
        return (self.data.get("extra") or {}).get("latest_version") or ""

    def _nav_item(self, is_module: bool) -> dict[str, Any]:
        key = _NAV_KEYS[bool(is_module)]
        for item in self.data.get("nav") or []:
            if isinstance(item, dict) and key in item:
                return item
        raise KeyError(f"navigation has no {key} section")

    def nav_entries(self, is_module: bool) -> list[str]:
        """Return the pages listed under Modules or Examples in the navigation.

        Raises ``KeyError`` when the section is missing.
        """
        return list(self._nav_item(is_module)[_NAV_KEYS[bool(is_module)]] or [])

    def replace_nav_entries(self, is_module: bool, entries: list[str]) -> None:
        """Replace the pages listed under Modules or Examples in the navigation."""
        self._nav_item(is_module)[_NAV_KEYS[bool(is_module)]] = list(entries)


def get_root_dir() -> str:
    """Return the parent of the current working directory."""
    return os.path.dirname(os.getcwd())


def get_mkdocs_config_file(root_dir: str | os.PathLike[str]) -> str:
    """Return the path of the MkDocs configuration below ``root_dir``."""
    return os.path.join(os.fspath(root_dir), "mkdocs.yml")


def read_mkdocs_config(root_dir: str | os.PathLike[str]) -> MkDocsConfig:
    """Read the MkDocs configuration below ``root_dir``."""
    with open(get_mkdocs_config_file(root_dir), encoding="utf-8") as handle:
        data = yaml.load(handle, Loader=_Loader)
    return MkDocsConfig(data=data or {})


def write_mkdocs_config(root_dir: str | os.PathLike[str], config: MkDocsConfig) -> None:
    """Write the MkDocs configuration below ``root_dir``."""
    text = yaml.safe_dump(config.data, sort_keys=False, allow_unicode=True)
    with open(get_mkdocs_config_file(root_dir), "w", encoding="utf-8") as handle:
        handle.write(text)


def generate_mkdocs(root_dir: str | os.PathLike[str], example: Example) -> None:
    """Add the example's page to the navigation, index first and the rest sorted."""
    config = read_mkdocs_config(root_dir)
    parent = example.parent_dir()

    entries = [
        entry
        for entry in config.nav_entries(example.is_module)
        if not entry.endswith("index.md")
    ]
    entries.append(parent + "/" + example.lower() + ".md")
    entries.sort()

    config.replace_nav_entries(example.is_module, [parent + "/index.md", *entries])
    write_mkdocs_config(root_dir, config)