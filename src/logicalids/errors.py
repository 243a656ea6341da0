"""Naming error taxonomy shared by the addressing schemes and the registry.

Every failure is a ``LogicalIdError`` tagged with an ``ErrorKind``; the
per-kind subclasses exist so callers can catch a single kind, while
``to_dict`` gives reports one shape for all of them.

Example:
    >>> err = DuplicateRenameError("OldA")
    >>> err.kind is ErrorKind.DUPLICATE_RENAME
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    EMPTY_PATH = "empty_path"
    DUPLICATE_RENAME = "duplicate_rename"
    INVALID_IDENTIFIER_FORMAT = "invalid_identifier_format"
    IDENTIFIER_COLLISION = "identifier_collision"
    UNUSED_RENAMES = "unused_renames"


@dataclass
class LogicalIdError(Exception):
    """Base error for logical ID allocation.

    Attributes:
        kind: Which naming rule was violated.
        message: Human-readable description.
        logical_id: The offending final identifier, when there is one.
        originals: Original (pre-rename) identifiers involved in the failure.
        path: Path components of the node being resolved, when known.
    """

    kind: ErrorKind
    message: str
    logical_id: str | None = None
    originals: list[str] = field(default_factory=list)
    path: list[str] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, ...]:
        # subclasses take their own constructor arguments, so rebuild from the fields
        return (
            _restore_error,
            (type(self), self.kind, self.message, self.logical_id, list(self.originals), self.path),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "logical_id": self.logical_id,
            "originals": list(self.originals),
            "path": list(self.path) if self.path is not None else None,
        }


class EmptyPathError(LogicalIdError):
    """Raised when a path has no components, or a component is empty."""

    def __init__(self, path: Sequence[str] | None = None) -> None:
        components = list(path) if path else []
        if components:
            message = f"Construct path '{'/'.join(components)}' has an empty component"
        else:
            message = "Construct has empty Logical ID"
        super().__init__(
            kind=ErrorKind.EMPTY_PATH,
            message=message,
            path=components,
        )


class DuplicateRenameError(LogicalIdError):
    """Raised when a second override is registered for the same original."""

    def __init__(self, original: str) -> None:
        super().__init__(
            kind=ErrorKind.DUPLICATE_RENAME,
            message=f"A rename has already been registered for '{original}'",
            originals=[original],
        )


class InvalidIdentifierFormatError(LogicalIdError):
    """Raised when a final identifier does not match the naming grammar."""

    def __init__(self, logical_id: str, pattern: str, path: Sequence[str] | None = None) -> None:
        super().__init__(
            kind=ErrorKind.INVALID_IDENTIFIER_FORMAT,
            message=f"Logical ID must adhere to the regular expression: /{pattern}/, got '{logical_id}'",
            logical_id=logical_id,
            path=list(path) if path is not None else None,
        )


class IdentifierCollisionError(LogicalIdError):
    """Raised when two distinct originals end up with the same final identifier."""

    def __init__(
        self,
        logical_id: str,
        existing: str,
        incoming: str,
        path: Sequence[str] | None = None,
        existing_path: str | None = None,
    ) -> None:
        if existing == incoming and existing_path is not None and path is not None:
            message = (
                f"Two objects have been assigned the same Logical ID: '{existing_path}' and "
                f"'{'/'.join(path)}' both generate '{incoming}' and are now both named '{logical_id}'."
            )
        else:
            message = (
                f"Two objects have been assigned the same Logical ID: '{existing}' and "
                f"'{incoming}' are now both named '{logical_id}'."
            )
        super().__init__(
            kind=ErrorKind.IDENTIFIER_COLLISION,
            message=message,
            logical_id=logical_id,
            originals=[existing, incoming],
            path=list(path) if path is not None else None,
        )


class UnusedRenamesError(LogicalIdError):
    """Raised by the end-of-pass audit when registered renames never matched."""

    def __init__(self, unused: Iterable[str]) -> None:
        names = list(unused)
        super().__init__(
            kind=ErrorKind.UNUSED_RENAMES,
            message=(
                "The following Logical IDs were attempted to be renamed, but not found: "
                f"{', '.join(names)}"
            ),
            originals=names,
        )


def _restore_error(
    cls: type[LogicalIdError],
    kind: ErrorKind,
    message: str,
    logical_id: str | None,
    originals: list[str],
    path: list[str] | None,
) -> LogicalIdError:
    err = cls.__new__(cls)
    LogicalIdError.__init__(
        err,
        kind=kind,
        message=message,
        logical_id=logical_id,
        originals=originals,
        path=path,
    )
    return err
