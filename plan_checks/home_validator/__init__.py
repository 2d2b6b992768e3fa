"""Plan grid validation against the products API"""

from .grid_validator import (
    GridValidator,
    NO_GRID_ITEMS_ERROR,
)

from .types import (
    ExpectedProductValues,
    FieldValidationResult,
    GridItemResult,
    GridSelectors,
    ValidationResult,
)

from .formatter import (
    format_data_plan,
    format_duration,
    format_number,
    format_price,
    format_product_values,
)

from .match_strategies import (
    ExactMatchStrategy,
    MatchStrategy,
    NumericMatchStrategy,
    SubstringMatchStrategy,
    get_match_strategy,
)

from .product_matcher import (
    find_matching_product,
)

from .field_validator import (
    validate_all_product_fields,
)

from .data_interactor import (
    DataInteractor,
)

__all__ = [
    # Main validator
    'GridValidator',
    'NO_GRID_ITEMS_ERROR',
    # Types
    'ExpectedProductValues',
    'FieldValidationResult',
    'GridItemResult',
    'GridSelectors',
    'ValidationResult',
    # Formatting
    'format_data_plan',
    'format_duration',
    'format_number',
    'format_price',
    'format_product_values',
    # Matching
    'ExactMatchStrategy',
    'MatchStrategy',
    'NumericMatchStrategy',
    'SubstringMatchStrategy',
    'get_match_strategy',
    'find_matching_product',
    # Field checks and preparation
    'validate_all_product_fields',
    'DataInteractor',
]
