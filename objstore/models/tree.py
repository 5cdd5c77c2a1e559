import os
from dataclasses import dataclass, field
from enum import IntEnum

from objstore.models.serializable import (
    NULL_BYTE,
    ObjectType,
    Serializable,
    digest_of,
    encode_object,
)

__all__ = ["FileMode", "TreeEntry", "Tree"]


class FileMode(IntEnum):
    REGULAR = 0o100644
    EXECUTABLE = 0o100755
    DIRECTORY = 0o40000
    SYMLINK = 0o120000


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    mode: int
    name: str
    target: Serializable

    def serialize(self) -> bytes:
        # modes are written as bare octal digits, e.g. 100644 or 40000
        header = f"{self.mode:o} ".encode() + os.fsencode(self.name)
        return header + NULL_BYTE + digest_of(self.target)


@dataclass(frozen=True, kw_only=True)
class Tree:
    entries: tuple[TreeEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))

    def serialize(self) -> bytes:
        content = b"".join(entry.serialize() for entry in self.entries)
        return encode_object(ObjectType.TREE, content)
