"""The shell's ordered environment of variables."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from minishell.libft import itoa, strncmp

_VALUE_COMPARE_LIMIT = 1000


class Environment:
    """Ordered variables; a value of ``None`` marks a variable exported without one."""

    def __init__(
        self,
        variables: Mapping[str, str | None] | Iterable[tuple[str, str | None]] | None = None,
    ) -> None:
        self._variables: dict[str, str | None] = {}
        if variables is None:
            return
        pairs = variables.items() if isinstance(variables, Mapping) else variables
        for name, value in pairs:
            self._variables[name] = value

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build from ``NAME=VALUE`` strings; an entry without ``=`` has no value."""
        pairs = []
        for entry in entries:
            name, sep, value = entry.partition("=")
            pairs.append((name, value if sep else None))
        return cls(pairs)

    def set(self, name: str, value: str | None) -> None:
        """Set a variable, keeping its position if it already exists."""
        self._variables[name] = value

    def remove(self, name: str) -> None:
        """Remove a variable; raises ``KeyError`` if it is absent."""
        if name not in self._variables:
            raise KeyError(name)
        self._variables.pop(name)

    def names(self) -> list[str]:
        """Variable names in order."""
        return list(self._variables)

    def items(self) -> list[tuple[str, str | None]]:
        """``(name, value)`` pairs in order."""
        return list(self._variables.items())

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._variables))

    def __len__(self) -> int:
        return len(self._variables)

    def get_value(self, name: str | None) -> str | None:
        """Value of the variable named exactly ``name``, or ``None``."""
        if name is None:
            return None
        return self._variables.get(name)

    def get_name(self, value: str | None) -> str | None:
        """Name of the first variable whose value matches ``value``, or ``None``.

        Only the first thousand characters take part in the comparison.
        """
        if value is None:
            return None
        for name, current in self._variables.items():
            if current is not None and strncmp(current, value, _VALUE_COMPARE_LIMIT) == 0:
                return name
        return None

    def to_array(self) -> list[str]:
        """``NAME=VALUE`` strings, or bare names for variables without a value."""
        return [
            name if value is None else f"{name}={value}"
            for name, value in self._variables.items()
        ]

    def update_error_code(self, code: int) -> None:
        """Store ``code`` in every variable whose name starts with ``?``."""
        text = itoa(code)
        for name in self._variables:
            if name.startswith("?"):
                self._variables[name] = text