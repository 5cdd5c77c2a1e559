from objstore.models.blob import Blob
from objstore.models.hashing import Digest, create_hash, derive_path, to_hex
from objstore.models.serializable import ObjectType, Serializable, digest_of, encode_object
from objstore.models.store import ObjectStore
from objstore.models.tree import FileMode, Tree, TreeEntry
