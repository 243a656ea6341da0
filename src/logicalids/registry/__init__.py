from logicalids.registry.ledger import LogicalIds, Resolution
from logicalids.registry.validate import (
    LOGICAL_ID_PATTERN,
    is_valid_logical_id,
    validate_logical_id,
)

__all__ = [
    "LOGICAL_ID_PATTERN",
    "LogicalIds",
    "Resolution",
    "is_valid_logical_id",
    "validate_logical_id",
]
