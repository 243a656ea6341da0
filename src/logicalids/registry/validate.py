from __future__ import annotations

import re
from collections.abc import Sequence

from logicalids.errors import InvalidIdentifierFormatError

LOGICAL_ID_PATTERN = r"^[A-Za-z][A-Za-z0-9]{1,254}$"
VALID_LOGICAL_ID = re.compile(LOGICAL_ID_PATTERN)


def is_valid_logical_id(logical_id: str) -> bool:
    # fullmatch so a trailing newline is not accepted by "$"
    return VALID_LOGICAL_ID.fullmatch(logical_id) is not None


def validate_logical_id(logical_id: str, path: Sequence[str] | None = None) -> None:
    if not is_valid_logical_id(logical_id):
        raise InvalidIdentifierFormatError(logical_id, LOGICAL_ID_PATTERN, path)
