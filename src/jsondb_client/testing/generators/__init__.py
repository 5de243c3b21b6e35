"""Testing generators – property-based strategies (hypothesis required)."""
from jsondb_client.testing.generators.strategies import (
    comparison_strategy,
    field_name_strategy,
    filter_strategy,
    scalar_strategy,
)

__all__ = [
    "comparison_strategy",
    "field_name_strategy",
    "filter_strategy",
    "scalar_strategy",
]
