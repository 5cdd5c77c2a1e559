import pathlib
from dataclasses import dataclass
from os import PathLike

from objstore.errors import ObjectStoreError
from objstore.models.serializable import ObjectType, encode_object

__all__ = ["Blob"]


@dataclass(frozen=True, kw_only=True)
class Blob:
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "Blob":
        return cls(data=bytes(data))

    @classmethod
    def from_file(cls, path: PathLike | str) -> "Blob":
        path = pathlib.Path(path)
        try:
            with path.open("rb") as f:
                data = f.read()
        except OSError as e:
            raise ObjectStoreError(f"Cannot read {path}: {e}") from e
        return cls(data=data)

    def serialize(self) -> bytes:
        return encode_object(ObjectType.BLOB, self.data)
