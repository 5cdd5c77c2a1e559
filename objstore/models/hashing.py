import hashlib
import pathlib

__all__ = ["Digest", "DIGEST_SIZE", "create_hash", "to_hex", "derive_path"]

Digest = bytes  # 20 raw bytes, sha1 of an object body

DIGEST_SIZE = 20
FANOUT = 2


def create_hash(data: bytes, *, hasher=hashlib.sha1) -> Digest:
    return hasher(data).digest()


def to_hex(digest: Digest) -> str:
    return digest.hex()


def derive_path(digest: Digest) -> pathlib.PurePath:
    """Split a digest into ``<2 hex chars>/<38 hex chars>``."""
    hash_value = to_hex(digest)
    return pathlib.PurePath(hash_value[:FANOUT], hash_value[FANOUT:])
