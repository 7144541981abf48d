"""
Query parameter validation.

Rules live in a single table keyed by field name so every lookup route
shares one validation path instead of inlining its own regex.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from exceptions import ValidationError


@dataclass(frozen=True)
class ParamRule:
    field: str
    pattern: Optional[re.Pattern[str]] = None
    normalize: Optional[Callable[[str], str]] = None
    # pattern only enforced in strict mode
    strict_only: bool = False


PARAM_RULES: dict[str, ParamRule] = {
    "name": ParamRule(
        field="name",
        pattern=re.compile(r"[a-z0-9-]+"),
        normalize=str.lower,
        strict_only=True,
    ),
    "isbn": ParamRule(
        field="isbn",
        pattern=re.compile(r"[0-9X]{10,13}", re.IGNORECASE),
    ),
}


def validate_param(field: str, raw: Optional[str], *, strict: bool = True) -> str:
    """Return the normalized parameter value or raise ``ValidationError``.

    Missing, empty and whitespace-only values always fail. The pattern is
    matched against the normalized value, so ``Pikachu`` is accepted as
    ``pikachu``.
    """
    rule = PARAM_RULES.get(field)
    if rule is None:
        raise KeyError(f"No validation rule for field: {field}")

    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(field)

    value = rule.normalize(raw) if rule.normalize else raw
    if rule.pattern is not None and (strict or not rule.strict_only):
        if rule.pattern.fullmatch(value) is None:
            raise ValidationError(field)
    return value


__all__ = ["ParamRule", "PARAM_RULES", "validate_param"]
