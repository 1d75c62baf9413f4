"""Exception hierarchy for configuration loading."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class YamlBindError(Exception):
    """Base class for errors raised by yamlbind."""


class InvariantViolation(RuntimeError):
    """Raised on programming errors, e.g. surfacing an empty error set.

    Never a :class:`ConfigurationError`, so it is not reported as a problem
    with the user's configuration.
    """


class YAMLSafetyError(YamlBindError):
    """Raised when YAML input violates the loader's safety limits."""


def format_message(source: str, errors: Sequence[str]) -> str:
    """Render the ``<source> has ... error(s):`` banner followed by one bullet per error."""
    if not errors:
        raise InvariantViolation(f"cannot format an empty error set for {source}")
    banner = " has an error:" if len(errors) == 1 else " has the following errors:"
    lines = [f"{source}{banner}\n"]
    lines.extend(f"  * {error}\n" for error in errors)
    return "".join(lines)


class ConfigurationError(YamlBindError):
    """User-facing error describing everything wrong with one configuration source."""

    def __init__(self, source: str, errors: Iterable[str]) -> None:
        self.source = source
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__(format_message(source, self.errors))


class ConfigurationParsingError(ConfigurationError):
    """Raised when a configuration source cannot be parsed or bound."""

