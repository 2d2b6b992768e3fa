"""Policies deciding whether an expected value occurs in a grid card's text.

Usage:
    strategy = get_match_strategy('numeric')
    strategy.matches("1234.5", "Price 1,234.50 EUR")  # True
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple, Type

__all__ = [
    'ExactMatchStrategy',
    'MATCH_STRATEGIES',
    'MatchStrategy',
    'NumericMatchStrategy',
    'SubstringMatchStrategy',
    'get_match_strategy',
]


class MatchStrategy(ABC):
    """Decides whether ``expected`` occurs in ``text``."""

    name = ''

    @abstractmethod
    def matches(self, expected: str, text: str) -> bool:
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SubstringMatchStrategy(MatchStrategy):
    """Literal containment. Tolerates surrounding text and markup."""

    name = 'substring'

    def matches(self, expected: str, text: str) -> bool:
        return expected in text


class ExactMatchStrategy(MatchStrategy):
    """Whole-value containment.

    A number in the value may not be glued to more digits, so "9.99" does
    not match inside "19.99" or "9.995" and "5 GB" does not match inside
    "15 GB". A currency code may touch it ("EUR9.99", "9.99EUR"). A word may
    not run into more letters ("5 GB" vs "5 GBP"). Spacing inside the value
    must be the same as on the card, so "5 GB" does not match "5GB".
    """

    name = 'exact'

    def matches(self, expected: str, text: str) -> bool:
        if not expected:
            return False
        head = r'(?<![\d.,])' if expected[0].isdigit() else r'(?<![^\W_])'
        tail = r'(?!\d|[.,]\d)' if expected[-1].isdigit() else r'(?![^\W_])'
        pattern = head + re.escape(expected) + tail
        return re.search(pattern, text) is not None


# Digits with optional grouping/decimal separators (dot, comma, NBSP, narrow NBSP)
_NUMBER_RE = re.compile(r'\d+(?:[.,\u00a0\u202f]\d+)*')


def _parse_number(token: str) -> Optional[float]:
    """Parse a localized number such as "1,234.50", "9,99" or "1.000".

    When both '.' and ',' appear, the last one is the decimal separator.
    A single separator followed by exactly three digits is read as
    thousands grouping; otherwise it is the decimal separator.
    """
    token = token.replace('\u00a0', '').replace('\u202f', '')
    has_dot = '.' in token
    has_comma = ',' in token

    if has_dot and has_comma:
        decimal = '.' if token.rfind('.') > token.rfind(',') else ','
        grouping = ',' if decimal == '.' else '.'
        token = token.replace(grouping, '').replace(decimal, '.')
    elif has_dot or has_comma:
        separator = '.' if has_dot else ','
        parts = token.split(separator)
        if len(parts) > 2 or len(parts[-1]) == 3:
            token = ''.join(parts)
        else:
            token = '.'.join(parts)

    try:
        return float(token)
    except ValueError:
        return None


def _readings(token: str) -> List[float]:
    """Every plausible value of ``token``.

    A lone separator before exactly three digits ("1.234", "1,234") is
    ambiguous, so the decimal reading is offered after the grouping one.
    """
    value = _parse_number(token)
    readings = [] if value is None else [value]

    compact = token.replace('\u00a0', '').replace('\u202f', '')
    parts = re.split(r'[.,]', compact)
    if len(parts) == 2 and len(parts[1]) == 3:
        readings.append(float('.'.join(parts)))
    return readings


def _numbers(text: str) -> Iterator[Tuple[float, int]]:
    """Yield (value, end offset) for every reading of every number in ``text``."""
    for match in _NUMBER_RE.finditer(text):
        for value in _readings(match.group()):
            yield value, match.end()


class NumericMatchStrategy(MatchStrategy):
    """Numeric comparison after normalizing separators.

    The expected value is a number optionally followed by a unit
    ("9.99", "5 GB"). A text number matches when it is numerically
    equal and, if a unit is expected, the unit follows it.
    """

    name = 'numeric'

    def __init__(self, tolerance: float = 1e-9):
        self.tolerance = tolerance

    def matches(self, expected: str, text: str) -> bool:
        number_part, _, unit = expected.strip().partition(' ')
        try:
            target = float(number_part)
        except ValueError:
            target = _parse_number(number_part)
        if target is None:
            return expected in text

        unit = unit.strip()
        for value, end in _numbers(text):
            if abs(value - target) > self.tolerance:
                continue
            if not unit or text[end:].lstrip().startswith(unit):
                return True
        return False


MATCH_STRATEGIES: Dict[str, Type[MatchStrategy]] = {
    SubstringMatchStrategy.name: SubstringMatchStrategy,
    ExactMatchStrategy.name: ExactMatchStrategy,
    NumericMatchStrategy.name: NumericMatchStrategy,
}


def get_match_strategy(name: str) -> MatchStrategy:
    """Instantiate a strategy by name."""
    if name not in MATCH_STRATEGIES:
        raise ValueError(f"Unknown match strategy: {name}. Available: {list(MATCH_STRATEGIES)}")
    return MATCH_STRATEGIES[name]()
