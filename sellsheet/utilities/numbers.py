"""Parse-or-zero coercion for numbers coming from forms or persisted JSON."""
import math
from decimal import Decimal
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    '''Return value as a finite float, or None when it is not a usable number.

    Numbers pass through (bool counts as 0/1) and numeric strings are parsed
    after stripping whitespace. Empty text parses as 0, like a blank form field.
    '''
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        # Python-only spellings such as "1_000" are not numbers in a form field
        if '_' in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_or_zero(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None else 0.0


def as_number(value: Any) -> Optional[float]:
    '''Strict variant used by validation: real numbers only, no text or bools.'''
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None
