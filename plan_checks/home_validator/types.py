"""Result and expectation types for plan grid validation."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from plan_checks.shared.product_schema import Product

__all__ = [
    'ExpectedProductValues',
    'FieldValidationResult',
    'GridItemResult',
    'GridSelectors',
    'Product',
    'ValidationResult',
]


@dataclass(frozen=True)
class ExpectedProductValues:
    """Strings a grid card must display for one product."""
    price: str
    data_plan: str
    duration: str
    plan_type: str

    def fields(self) -> List[Tuple[str, str]]:
        """(label, value) pairs in validation order."""
        return [
            ('Price', self.price),
            ('Data plan', self.data_plan),
            ('Duration', self.duration),
            ('Plan Type', self.plan_type),
        ]


@dataclass(frozen=True)
class GridSelectors:
    """CSS selectors locating the plan grid.

    Attributes:
        grid: One match per plan card
        data_toggle: "Data" toggles to expand before reading the cards
        container: Element wrapping the cards; present even when no plans are listed
    """
    grid: str
    data_toggle: str
    container: str

    @classmethod
    def from_config(cls, config) -> 'GridSelectors':
        return cls(
            grid=config.GRID_SELECTOR,
            data_toggle=config.GRID_DATA_SELECTOR,
            container=config.GRID_CONTAINER_SELECTOR,
        )


@dataclass
class FieldValidationResult:
    """Outcome of the field checks for one grid card.

    ``results`` holds one bool per field, in ExpectedProductValues.fields() order.
    """
    results: List[bool]
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(self.results)


@dataclass
class GridItemResult:
    """Outcome for one grid card.

    Attributes:
        index: 1-based position of the card in the grid
        product: Matched product, or None when nothing matched
        field_results: Per-field outcomes (empty when unmatched)
    """
    index: int
    product: Optional[Product]
    field_results: List[bool] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.product is not None and all(self.field_results)


class ValidationResult:
    """Result of reconciling a grid against products.

    Attributes:
        all_passed: True if every grid item matched and showed every field
        errors: Human-readable failures in the order they were found
        items: Per-card outcomes in grid order
    """

    def __init__(self, all_passed: bool, errors: List[str], items: Optional[List[GridItemResult]] = None):
        self.all_passed = all_passed
        self.errors = errors
        self.items = items or []

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def passed_count(self) -> int:
        return sum(1 for item in self.items if item.passed)

    def __bool__(self) -> bool:
        return self.all_passed

    def __repr__(self) -> str:
        return f"ValidationResult(all_passed={self.all_passed}, items={self.total}, errors={len(self.errors)})"
