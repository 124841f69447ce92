"""``# type: ignore`` comments attached to generated definitions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .rule_name import CustomRule, RuleName, parse_rule_name

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class IgnoreTarget:
    """Which type-checker errors a definition suppresses.

    ``rules`` of None ignores every error; otherwise only the named rules.
    """

    rules: tuple[str, ...] | None = None

    @classmethod
    def all(cls) -> IgnoreTarget:
        """Ignore every type-checking error (``# type: ignore``)."""
        return cls(None)

    @classmethod
    def specified(cls, rules: Iterable[str]) -> IgnoreTarget:
        """Ignore only the given rules (``# type: ignore[rule1,rule2]``)."""
        return cls(tuple(rules))

    def parsed_rules(self) -> list[RuleName | CustomRule]:
        """The rules as parsed rule names; empty when every error is ignored."""
        return [parse_rule_name(rule) for rule in self.rules or ()]

    def comment(self) -> str:
        """The trailing comment, with its two leading spaces."""
        if self.rules is None:
            return "  # type: ignore"
        parsed = self.parsed_rules()
        for rule in parsed:
            if not rule.is_known():
                _log.warning(
                    "Unknown custom rule name '%s' used in type ignore. "
                    "Ensure this is intended.",
                    rule,
                )
        return f"  # type: ignore[{','.join(str(rule) for rule in parsed)}]"