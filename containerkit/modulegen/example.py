"""Description of a module or example to generate, and the names derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VALID_NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_WORD = re.compile(r"\w+")
_RULE = "Only alphanumerical characters are allowed (leading character must be a letter)"


class InvalidExampleError(ValueError):
    """Raised when an example's name or title is not acceptable."""


@dataclass
class Example:
    """A module or example to be generated."""

    name: str
    image: str = ""
    is_module: bool = False
    title_name: str = ""
    tc_version: str = ""

    def container_name(self) -> str:
        """Return the name of the container type.

        Modules use the title; examples use the title with a lower-cased first
        letter when a title is set, otherwise the lower-cased name.
        """
        if self.is_module:
            name = self.title()
        elif self.title_name:
            name = self.title_name[0].lower() + self.title_name[1:]
        else:
            name = self.lower()
        return name + "Container"

    def entrypoint(self) -> str:
        """Return the name of the function that starts the container."""
        return "RunContainer" if self.is_module else "runContainer"

    def lower(self) -> str:
        """Return the name in lower case."""
        return self.name.lower()

    def parent_dir(self) -> str:
        """Return the directory that holds generated code of this kind."""
        return "modules" if self.is_module else "examples"

    def title(self) -> str:
        """Return the title, or the lower-cased name with each word capitalised."""
        if self.title_name:
            return self.title_name
        return _WORD.sub(lambda m: m.group()[0].upper() + m.group()[1:], self.lower())

    def type(self) -> str:
        """Return ``"module"`` or ``"example"``."""
        return "module" if self.is_module else "example"

    def validate(self) -> None:
        """Raise ``InvalidExampleError`` unless name and title are alphanumeric."""
        if not _VALID_NAME.fullmatch(self.name):
            raise InvalidExampleError(f"invalid name: {self.name}. {_RULE}")
        if not _VALID_NAME.fullmatch(self.title_name):
            raise InvalidExampleError(f"invalid title: {self.title_name}. {_RULE}")