from importlib.metadata import PackageNotFoundError, version

from logicalids.addressing.scheme import (
    AddressingScheme,
    HashedAddressingScheme,
    PassThroughAddressingScheme,
)
from logicalids.errors import (
    DuplicateRenameError,
    EmptyPathError,
    ErrorKind,
    IdentifierCollisionError,
    InvalidIdentifierFormatError,
    LogicalIdError,
    UnusedRenamesError,
)
from logicalids.registry.ledger import LogicalIds, Resolution

__all__ = [
    "__version__",
    "AddressingScheme",
    "HashedAddressingScheme",
    "PassThroughAddressingScheme",
    "LogicalIds",
    "Resolution",
    "ErrorKind",
    "LogicalIdError",
    "EmptyPathError",
    "DuplicateRenameError",
    "InvalidIdentifierFormatError",
    "IdentifierCollisionError",
    "UnusedRenamesError",
]

try:
    __version__ = version("logicalids")
except PackageNotFoundError:  # pragma: no cover - fallback for editable source trees
    __version__ = "0.1.0"
