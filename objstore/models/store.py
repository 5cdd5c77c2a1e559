import logging
import os
import pathlib
import stat
import tempfile
from os import PathLike

from objstore.errors import ObjectStoreError
from objstore.models.blob import Blob
from objstore.models.hashing import Digest, create_hash, derive_path, to_hex
from objstore.models.serializable import Serializable
from objstore.models.tree import FileMode, Tree, TreeEntry

__all__ = ["ObjectStore"]

logger = logging.getLogger(__name__)

GIT_DIR = ".git"
OBJECTS_DIR = "objects"


class ObjectStore:
    def __init__(self, root: PathLike | str = ".", *, git_dir: str = GIT_DIR):
        self.root = pathlib.Path(root)
        self.git_folder = self.root / git_dir
        self.objects_folder = self.git_folder / OBJECTS_DIR

    def init_store(self):
        try:
            self.objects_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ObjectStoreError(
                f"Cannot create object directory {self.objects_folder}: {e}"
            ) from e

    def object_path(self, digest: Digest) -> pathlib.Path:
        return self.objects_folder / derive_path(digest)

    def contains(self, digest: Digest) -> bool:
        return self.object_path(digest).is_file()

    def save(self, body: bytes) -> Digest:
        digest = create_hash(body)
        path = self.object_path(digest)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if path.exists():
                logger.debug("Object %s already stored", to_hex(digest))
                return digest
            self._write_file(path, body)
        except OSError as e:
            raise ObjectStoreError(f"Cannot write object {to_hex(digest)}: {e}") from e
        logger.debug("Stored object %s (%d bytes)", to_hex(digest), len(body))
        return digest

    @staticmethod
    def _write_file(path: pathlib.Path, body: bytes):
        # the object path only ever holds a complete body
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
        tmp_path = pathlib.Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(body)
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def save_object(self, obj: Serializable) -> Digest:
        return self.save(obj.serialize())

    def hash_object(self, path: PathLike | str, *, write: bool = False) -> Digest:
        body = Blob.from_file(path).serialize()
        if write:
            return self.save(body)
        return create_hash(body)

    def write_tree(
        self, directory: PathLike | str | None = None, *, write: bool = True
    ) -> Digest:
        if directory is None:
            directory = self.root
        tree = self._build_tree(pathlib.Path(directory), write=write)
        if write:
            return self.save_object(tree)
        return create_hash(tree.serialize())

    def _build_tree(self, dir_path: pathlib.Path, *, write: bool) -> Tree:
        try:
            return self._walk(dir_path, write=write)
        except OSError as e:
            raise ObjectStoreError(f"Cannot read directory {dir_path}: {e}") from e

    def _walk(self, dir_path: pathlib.Path, *, write: bool) -> Tree:
        entries = []
        for entry in sorted(dir_path.iterdir()):
            if entry.name == self.git_folder.name:
                continue

            if entry.is_symlink():
                mode = FileMode.SYMLINK
                target = Blob.from_bytes(os.fsencode(os.readlink(entry)))
            elif entry.is_dir():
                mode = FileMode.DIRECTORY
                target = self._build_tree(entry, write=write)
            elif entry.is_file():
                mode = self._file_mode(entry)
                target = Blob.from_file(entry)
            else:
                continue

            if write:
                self.save_object(target)
            entries.append(TreeEntry(mode=mode, name=entry.name, target=target))
        return Tree(entries=entries)

    @staticmethod
    def _file_mode(path: pathlib.Path) -> FileMode:
        if path.stat().st_mode & stat.S_IXUSR:
            return FileMode.EXECUTABLE
        return FileMode.REGULAR
