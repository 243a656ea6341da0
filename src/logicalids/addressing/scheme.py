from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from logicalids.addressing.identity import path_hash
from logicalids.errors import EmptyPathError

MAX_HUMAN_LEN = 240  # leaves room for the hash within the 255 character limit
HIDDEN_COMPONENT = "Resource"


class AddressingScheme(Protocol):
    name: str

    def allocate(self, path: Sequence[str]) -> str:
        ...


def check_path(path: Sequence[str]) -> None:
    if len(path) == 0 or any(c == "" for c in path):
        raise EmptyPathError(path)


def remove_dupes(path: Sequence[str]) -> list[str]:
    """Drop a component when the previously kept component ends with it.

    Only the last kept component is compared, so this is a suffix rule and
    not a general de-duplication: ``L1/L2/Pipeline/Pipeline`` keeps
    ``L1, L2, Pipeline`` while ``A/B/A`` is left untouched.
    """
    out: list[str] = []
    for component in path:
        if not out or not out[-1].endswith(component):
            out.append(component)
    return out


class HashedAddressingScheme:
    """Renders ``<human><hash>`` logical IDs.

    ``human`` is the path with adjacent suffix duplicates and ``Resource``
    components removed, concatenated and trimmed to 240 characters. ``hash``
    is the first 8 hex characters (uppercased) of an md5 over the full,
    unfiltered ``/``-joined path, so hiding a component never changes the
    fingerprint.

    Single-component paths are returned as-is. Top-level names then match
    the hand-written templates they were migrated from without renames.
    """

    name = "hashed"

    def allocate(self, path: Sequence[str]) -> str:
        check_path(path)
        if len(path) == 1:
            return path[0]

        fingerprint = path_hash(path)
        kept = [c for c in remove_dupes(path) if c != HIDDEN_COMPONENT]
        # a path made only of hidden components would otherwise start with a hex digit
        human = "".join(kept) or HIDDEN_COMPONENT
        return human[:MAX_HUMAN_LEN] + fingerprint


class PassThroughAddressingScheme:
    """Concatenates the path components verbatim; no hashing or filtering."""

    name = "passthrough"

    def allocate(self, path: Sequence[str]) -> str:
        check_path(path)
        return "".join(path)


SCHEMES: dict[str, type[HashedAddressingScheme] | type[PassThroughAddressingScheme]] = {
    HashedAddressingScheme.name: HashedAddressingScheme,
    PassThroughAddressingScheme.name: PassThroughAddressingScheme,
}


def scheme_from_name(name: str) -> AddressingScheme:
    key = name.strip().lower()
    if key not in SCHEMES:
        raise ValueError(f"Unknown addressing scheme '{name}' (expected one of: {', '.join(sorted(SCHEMES))})")
    return SCHEMES[key]()
