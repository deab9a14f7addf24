"""Combinators — rules built from other rules.

Wherever a combinator takes "a rule or a list of rules", the list is an
AND-sequence: rules run in order against the same value and the first
failure is the result. Rule sets are normalized once, when the
combinator is built.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rulekit.config.settings import get_settings
from rulekit.errors import RuleConfigError
from rulekit.messages import interpolate
from rulekit.types import VALID, Rule, RuleResult, RuleSet
from rulekit.values import ABSENT, Value, is_array, is_object

logger = logging.getLogger(__name__)


def _normalize(rules: RuleSet) -> tuple[Rule, ...]:
    """Flatten a rule or sequence of rules into a tuple of rules."""
    if callable(rules):
        return (rules,)
    if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence):
        raise RuleConfigError(f"Expected a rule or a sequence of rules, got {rules!r}")
    for entry in rules:
        if not callable(entry):
            raise RuleConfigError(f"Rule sets may only contain rules, got {entry!r}")
    return tuple(rules)


def _run_all(rules: tuple[Rule, ...], value: Value) -> RuleResult:
    for rule in rules:
        result = rule(value)
        if result is not VALID:
            return result
    return VALID


def all_of(rules: RuleSet) -> Rule:
    """Combine *rules* into one rule that fails with the first failure."""
    sequence = _normalize(rules)

    def rule(value: Value = ABSENT) -> RuleResult:
        return _run_all(sequence, value)

    return rule


def every(rules: RuleSet, message: str | None = None) -> Rule:
    """Apply *rules* to each element of an array.

    The first failing element decides the result: *message* when given,
    otherwise the failing rule's own message. Anything that is not an
    array passes; pair with ``type_of("array")`` to require one.
    """
    sequence = _normalize(rules)

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_array(value):
            return VALID
        for element in value:
            result = _run_all(sequence, element)
            if result is not VALID:
                return message if message is not None else result
        return VALID

    return rule


def or_(branches: Sequence[RuleSet], message: str | None = None) -> Rule:
    """Pass when any branch passes.

    Each branch is a rule or an AND-sequence of rules, tried in order.
    When all fail the result is *message*, or by default ``"is invalid: "``
    followed by every branch failure joined with ``", "``. No branches
    means nothing to fail, so the rule passes.
    """
    alternatives = tuple(_normalize(branch) for branch in branches)
    template = get_settings().messages.any_of
    logger.debug("Built or_ rule with %d branches", len(alternatives))

    def rule(value: Value = ABSENT) -> RuleResult:
        if not alternatives:
            return VALID
        reasons: list[str] = []
        for branch in alternatives:
            result = _run_all(branch, value)
            if result is VALID:
                return VALID
            reasons.append(result)
        if message is not None:
            return message
        return interpolate(template, {"reasons": ", ".join(reasons)})

    return rule


def _resolve(value: Value, path: tuple[str, ...]) -> Value:
    current = value
    for key in path:
        if not is_object(current) or key not in current:
            return ABSENT
        current = current[key]
    return current


def dig(path: str | Sequence[str], rules: RuleSet) -> Rule:
    """Apply *rules* to the value found at *path* inside an object.

    *path* is one key or a sequence of keys walked left to right. A
    missing key or a non-object along the way resolves to ``ABSENT``, so
    ``presence`` fails on a missing path. Values that are not objects
    pass without walking.

    Raises:
        RuleConfigError: If *path* is empty or not made of strings.
    """
    if isinstance(path, str):
        keys: tuple[str, ...] = (path,)
    elif isinstance(path, Sequence):
        keys = tuple(path)
    else:
        keys = ()
    if not keys or not all(isinstance(key, str) for key in keys):
        raise RuleConfigError(f"dig path must be one or more field names, got {path!r}")
    sequence = _normalize(rules)
    logger.debug("Built dig rule for path %s", ".".join(keys))

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_object(value):
            return VALID
        return _run_all(sequence, _resolve(value, keys))

    return rule
