"""Scalar rule factories.

Each factory closes over its configuration and returns a :data:`Rule`.
Shared contract: absent and null values pass every rule except
``presence``. Rules only judge the kinds of value they understand, so
``numericality`` passes strings and ``length`` passes numbers; compose
with ``type_of`` to reject the wrong kind.

Default messages come from the active
:class:`~rulekit.config.models.MessageCatalog`, read once per factory
call.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from rulekit.config.models import LengthOptions, NumericalityOptions
from rulekit.config.settings import get_settings
from rulekit.errors import RuleConfigError
from rulekit.messages import interpolate
from rulekit.types import VALID, Rule, RuleResult
from rulekit.values import (
    ABSENT,
    TypeName,
    Value,
    is_array,
    is_blank,
    is_boolean,
    is_defined,
    is_number,
    is_string,
    is_type,
)

logger = logging.getLogger(__name__)

# Type names that read "is not an ...".
_VOWEL_TYPES = frozenset({TypeName.INTEGER, TypeName.ARRAY, TypeName.OBJECT})


def _display(value: Any) -> str:
    """Render a configured value for a message.

    ``3.0`` reads ``3``, booleans read ``true``/``false`` and ``None``
    renders as nothing.
    """
    if value is None:
        return ""
    if is_boolean(value):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def presence(message: str | None = None) -> Rule:
    """Fail on blank values: absent, null, whitespace, empty array or object."""
    error = message if message is not None else get_settings().messages.blank

    def rule(value: Value = ABSENT) -> RuleResult:
        if is_blank(value):
            return error
        return VALID

    return rule


def numericality(min: int | float | None = None, max: int | float | None = None) -> Rule:
    """Require numbers to lie within ``[min, max]``; either bound is optional."""
    try:
        opts = NumericalityOptions(min=min, max=max)
    except ValidationError as exc:
        raise RuleConfigError(f"Invalid numericality options: {exc}") from exc

    catalog = get_settings().messages
    too_small = interpolate(catalog.greater_or_equal, {"min": _display(opts.min)})
    too_large = interpolate(catalog.less_or_equal, {"max": _display(opts.max)})

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_number(value):
            return VALID
        if opts.min is not None and value < opts.min:
            return too_small
        if opts.max is not None and value > opts.max:
            return too_large
        return VALID

    return rule


def length(
    min: int | None = None,
    max: int | None = None,
    is_: int | None = None,
) -> Rule:
    """Bound the length of strings and arrays.

    Checks run in the order min, max, is; the first violated bound
    decides the message. Other kinds of value pass.
    """
    try:
        opts = LengthOptions(min=min, max=max, exact=is_)
    except ValidationError as exc:
        raise RuleConfigError(f"Invalid length options: {exc}") from exc

    catalog = get_settings().messages
    too_short = interpolate(catalog.too_short, {"min": opts.min})
    too_long = interpolate(catalog.too_long, {"max": opts.max})
    wrong_length = interpolate(catalog.wrong_length, {"is": opts.exact})

    def rule(value: Value = ABSENT) -> RuleResult:
        if not (is_string(value) or is_array(value)):
            return VALID
        size = len(value)
        if opts.min is not None and size < opts.min:
            return too_short
        if opts.max is not None and size > opts.max:
            return too_long
        if opts.exact is not None and size != opts.exact:
            return wrong_length
        return VALID

    return rule


def _same_value(candidate: Any, allowed: Any) -> bool:
    # True == 1 in Python; booleans only match booleans here.
    if is_boolean(candidate) or is_boolean(allowed):
        return is_boolean(candidate) and is_boolean(allowed) and candidate == allowed
    return bool(candidate == allowed)


def _sorted_allow_list(values: Iterable[Any]) -> list[Any]:
    items = list(values)
    try:
        return sorted(items)
    except TypeError:
        # Mixed kinds (e.g. str and int) have no natural order.
        return sorted(items, key=_display)


def inclusion(values: Iterable[Any], message: str | None = None) -> Rule:
    """Require defined values to be one of *values*.

    The message template may use ``{{values}}``: the allow-list sorted
    ascending and joined with ``", "``. The caller's collection is copied,
    never reordered.
    """
    allowed = tuple(_sorted_allow_list(values))
    template = message if message is not None else get_settings().messages.inclusion
    error = interpolate(template, {"values": ", ".join(_display(v) for v in allowed)})
    logger.debug("Built inclusion rule over %d values", len(allowed))

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_defined(value):
            return VALID
        if any(_same_value(value, candidate) for candidate in allowed):
            return VALID
        return error

    return rule


def format(pattern: str | re.Pattern[str], message: str | None = None) -> Rule:
    """Require non-blank strings to match *pattern* in full.

    Matching uses :meth:`re.Pattern.fullmatch`, so a trailing newline
    fails unless the pattern allows it. Blank strings and non-strings
    pass.
    """
    try:
        compiled = re.compile(pattern)
    except (re.error, TypeError) as exc:
        raise RuleConfigError(f"Invalid format pattern {pattern!r}: {exc}") from exc
    if not isinstance(compiled.pattern, str):
        raise RuleConfigError(f"Format patterns must be text, got {pattern!r}")
    error = message if message is not None else get_settings().messages.invalid
    logger.debug("Built format rule for pattern %s", compiled.pattern)

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_string(value) or is_blank(value):
            return VALID
        if compiled.fullmatch(value) is None:
            return error
        return VALID

    return rule


def type_of(type_name: TypeName | str, message: str | None = None) -> Rule:
    """Require defined values to be of kind *type_name*.

    The empty string passes for every kind; blankness belongs to
    ``presence`` and ``length``.

    Raises:
        RuleConfigError: If *type_name* is not a known ``TypeName``.
    """
    try:
        kind = TypeName(type_name)
    except ValueError as exc:
        known = ", ".join(t.value for t in TypeName)
        raise RuleConfigError(f"Unknown type {type_name!r} (expected one of: {known})") from exc

    if message is not None:
        error = message
    else:
        catalog = get_settings().messages
        template = catalog.not_an if kind in _VOWEL_TYPES else catalog.not_a
        error = interpolate(template, {"type": kind.value})

    def rule(value: Value = ABSENT) -> RuleResult:
        if not is_defined(value) or (is_string(value) and value == "") or is_type(value, kind):
            return VALID
        return error

    return rule
