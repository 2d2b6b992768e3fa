"""
Product Schema - Data model for product records returned by the products API.

A product is one priced data-plan offer: a price in a currency, a data
allowance and a validity period. Records are built once from the API
payload and never mutated.
"""

from dataclasses import asdict, dataclass, field as dataclass_field
from typing import Any, Dict, List, Optional


__all__ = [
    'DATA_UNITS',
    'DURATION_UNITS',
    'Product',
]


DATA_UNITS = ('GB', 'MB', 'KB')
DURATION_UNITS = ('DAYS', 'HOURS', 'MINUTES')

_REQUIRED_FIELDS = ('id', 'name', 'price', 'price_currency', 'data', 'data_unit', 'duration', 'duration_unit')


@dataclass(frozen=True)
class Product:
    """Canonical product record.

    Required fields:
        id: Product identifier
        name: Display name
        price: Non-negative price amount
        price_currency: Currency code of ``price`` (e.g. EUR)
        data: Non-negative data allowance
        data_unit: One of GB, MB, KB
        duration: Validity period length
        duration_unit: One of DAYS, HOURS, MINUTES

    Optional fields mirror the rest of the API payload and are kept so
    diagnostics can show where a converted price came from.
    """
    id: str
    name: str
    price: Optional[float]
    price_currency: str
    data: Optional[float]
    data_unit: str
    duration: int
    duration_unit: str

    type: Optional[str] = None
    footprint_code: Optional[str] = None
    data_raw: Optional[float] = None
    footprint: Optional[List[str]] = None
    source_price: Optional[float] = None
    source_currency: Optional[str] = None
    fx_rate: Optional[float] = None

    extra_fields: Dict[str, Any] = dataclass_field(default_factory=dict, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Product':
        """Create a Product from one entry of the API ``products`` list.

        Keys that are not part of the schema are preserved in ``extra_fields``.

        Raises:
            ValueError: If a required field is missing
        """
        missing = [name for name in _REQUIRED_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Product {data.get('id', '?')} missing fields: {', '.join(missing)}")

        known = {f for f in cls.__dataclass_fields__ if f != 'extra_fields'}
        values = {}
        extra = {}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                extra[key] = value

        return cls(**values, extra_fields=extra)

    @property
    def is_eligible(self) -> bool:
        """True when both price and data are set and non-zero.

        Only eligible products take part in grid matching; free or
        zero-allowance offers are skipped.
        """
        return bool(self.price and self.data)

    def to_dict(self) -> Dict[str, Any]:
        """Export to a plain dictionary, dropping unset optional fields."""
        data = asdict(self)
        extra = data.pop('extra_fields') or {}
        data = {k: v for k, v in data.items() if v is not None}
        data.update(extra)
        return data
