"""Rule contract shared by factories and combinators.

A rule is a plain callable: it takes one value (``ABSENT`` when called
with no argument) and returns ``VALID`` or an error message.

INVARIANT: success is the ``True`` singleton and nothing else. Results
are compared by identity, so no message string is ever mistaken for
success, not even ``""``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Final, Literal, TypeAlias

from rulekit.values import Value

VALID: Final = True

RuleResult: TypeAlias = Literal[True] | str
Rule: TypeAlias = Callable[[Value], RuleResult]
RuleSet: TypeAlias = Rule | Sequence[Rule]


def is_valid(result: Any) -> bool:
    """Check whether *result* is the success marker."""
    return result is VALID
