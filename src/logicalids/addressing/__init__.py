from logicalids.addressing.identity import PATH_SEP, hash_text, join_path, path_hash, split_path
from logicalids.addressing.scheme import (
    HIDDEN_COMPONENT,
    MAX_HUMAN_LEN,
    SCHEMES,
    AddressingScheme,
    HashedAddressingScheme,
    PassThroughAddressingScheme,
    check_path,
    remove_dupes,
    scheme_from_name,
)

__all__ = [
    "PATH_SEP",
    "HIDDEN_COMPONENT",
    "MAX_HUMAN_LEN",
    "SCHEMES",
    "AddressingScheme",
    "HashedAddressingScheme",
    "PassThroughAddressingScheme",
    "check_path",
    "hash_text",
    "join_path",
    "path_hash",
    "remove_dupes",
    "scheme_from_name",
    "split_path",
]
