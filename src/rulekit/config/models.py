"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rulekit.toml only contains
overrides, e.g.::

    [messages]
    blank = "is required"
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

# --- [messages] section ---


class MessageCatalog(BaseModel):
    """Default failure messages, as ``{{name}}`` templates.

    Attributes:
        blank: ``presence`` failure.
        greater_or_equal: ``numericality`` below ``{{min}}``.
        less_or_equal: ``numericality`` above ``{{max}}``.
        too_short: ``length`` below ``{{min}}``.
        too_long: ``length`` above ``{{max}}``.
        wrong_length: ``length`` different from ``{{is}}``.
        inclusion: ``inclusion`` failure, ``{{values}}`` is the allow-list.
        invalid: ``format`` failure.
        not_a: ``type_of`` failure for ``{{type}}`` names taking "a".
        not_an: ``type_of`` failure for ``{{type}}`` names taking "an".
        any_of: ``or_`` failure, ``{{reasons}}`` joins the branch failures.

    Every message must be non-empty.
    """

    model_config = {"frozen": True, "str_min_length": 1}

    blank: str = "can't be blank"
    greater_or_equal: str = "must be greater or equal {{min}}"
    less_or_equal: str = "must be less or equal {{max}}"
    too_short: str = "is too short (minimum is {{min}} characters)"
    too_long: str = "is too long (maximum is {{max}} characters)"
    wrong_length: str = "is the wrong length (should be {{is}} characters)"
    inclusion: str = "must be one of: {{values}}"
    invalid: str = "is invalid"
    not_a: str = "is not a {{type}}"
    not_an: str = "is not an {{type}}"
    any_of: str = "is invalid: {{reasons}}"


# --- Rule options ---


class NumericalityOptions(BaseModel):
    """Inclusive bounds for ``numericality``."""

    model_config = {"frozen": True, "strict": True}

    min: int | float | None = None
    max: int | float | None = None


class LengthOptions(BaseModel):
    """Length bounds for ``length``; ``exact`` is the ``is`` bound."""

    model_config = {"frozen": True, "strict": True}

    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)
    exact: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> LengthOptions:
        if self.min is not None and self.max is not None and self.min > self.max:
            msg = f"min ({self.min}) must not exceed max ({self.max})"
            raise ValueError(msg)
        return self

