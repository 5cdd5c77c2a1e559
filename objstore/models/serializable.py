from enum import StrEnum, auto
from typing import Protocol, runtime_checkable

from objstore.models.hashing import Digest, create_hash

__all__ = ["ObjectType", "Serializable", "encode_object", "digest_of"]

NULL_BYTE = b"\x00"


class ObjectType(StrEnum):
    BLOB = auto()
    TREE = auto()


@runtime_checkable
class Serializable(Protocol):
    def serialize(self) -> bytes: ...


def encode_object(object_type: ObjectType, payload: bytes) -> bytes:
    header = f"{object_type} {len(payload)}".encode()
    return header + NULL_BYTE + payload


def digest_of(obj: Serializable) -> Digest:
    return create_hash(obj.serialize())
