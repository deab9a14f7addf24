"""Exceptions raised while building rules.

Validation failures are never exceptions: a rule returns its error
message. ``RuleConfigError`` covers misuse a caller can make when
constructing a rule, and is raised by the factory itself.
"""

from __future__ import annotations


class RuleConfigError(ValueError):
    """A rule factory was given configuration it cannot use."""
