from __future__ import annotations

import hashlib
from collections.abc import Sequence

PATH_SEP = "/"
HASH_LEN = 8


def split_path(path_str: str) -> list[str]:
    return path_str.split(PATH_SEP)


def join_path(components: Sequence[str]) -> str:
    return PATH_SEP.join(components)


def hash_text(text: str) -> str:
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def path_hash(components: Sequence[str]) -> str:
    # md5 keeps ids identical to those of templates migrated from earlier tooling
    return hash_text(join_path(components))[:HASH_LEN].upper()
