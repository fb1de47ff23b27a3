"""Values of command-line options that validate what they are given."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from testifylint.registry import is_known


class KnownCheckersValue(list):
    """Comma separated list of known checker names."""

    def __str__(self) -> str:
        return ",".join(self)

    def set(self, value: str) -> None:
        """Replace the list with the names in value; raise ValueError for unknown names."""
        names = value.split(",")
        for name in names:
            if not is_known(name):
                raise ValueError(f'unknown checker "{name}"')
        self[:] = names


@dataclass
class RegexpValue:
    """A regular expression given as an option value."""

    regexp: re.Pattern | None = None

    def __str__(self) -> str:
        return self.regexp.pattern if self.regexp is not None else ""

    def set(self, value: str) -> None:
        """Compile value; raise ValueError if it is not a valid expression."""
        try:
            self.regexp = re.compile(value, re.ASCII)
        except re.error as exc:
            raise ValueError(str(exc)) from exc


@dataclass
class EnumValue:
    """One of a fixed set of named values."""

    mapping: dict = field(default_factory=dict)
    value: object = None

    @property
    def keys(self) -> list[str]:
        return sorted(self.mapping)

    def __str__(self) -> str:
        if self.value is None:
            return ""
        for key, val in self.mapping.items():
            if val == self.value:
                return key
        return ""

    def set(self, value: str) -> None:
        """Select the value named value; raise ValueError for unknown names."""
        if value not in self.mapping:
            raise ValueError(f"use one of ({' | '.join(self.keys)})")
        self.value = self.mapping[value]