import os
import stat
import sys
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .. import config
from ..exceptions import FileMissingError
from ..scanning.filesystem import split_extension
from ..scanning.hasher import FileHasher


def get_mime_type(extension: str) -> str:
    """Static, case-insensitive extension lookup. No content sniffing."""
    return config.MIME_TYPES.get(extension.lower(), config.DEFAULT_MIME_TYPE)


class FileMetadata:
    """
    Read-only view of a single file.

    The path must exist at construction. Every property re-stats the file,
    so values track the disk; if the file disappears later, reads raise
    FileNotFoundError from the OS. Digest properties re-read and re-hash
    the whole file on each access; cache the result if you need it twice.
    """

    def __init__(self, path: Union[str, PathLike]):
        self._path = Path(path)
        if not self._path.is_file():
            raise FileMissingError("File not found.", path=str(path))
        self._hasher = FileHasher()

    def __repr__(self) -> str:
        return f"FileMetadata({str(self._path)!r})"

    # --- Names ---

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def extension(self) -> str:
        return split_extension(self.name)[1]

    @property
    def full_path(self) -> str:
        return str(self._path.absolute())

    @property
    def name_without_extension(self) -> str:
        return split_extension(self.name)[0]

    @property
    def directory_name(self) -> str:
        return str(self._path.absolute().parent)

    @property
    def mime_type(self) -> str:
        return get_mime_type(self.extension)

    # --- Stat-backed ---

    @property
    def size_bytes(self) -> int:
        return self._stat().st_size

    @property
    def created(self) -> datetime:
        st = self._stat()
        # st_birthtime exists on macOS/BSD and Windows (3.12+); ctime otherwise
        ts = getattr(st, 'st_birthtime', None)
        return datetime.fromtimestamp(ts if ts is not None else st.st_ctime)

    @property
    def last_accessed(self) -> datetime:
        return datetime.fromtimestamp(self._stat().st_atime)

    @property
    def last_modified(self) -> datetime:
        return datetime.fromtimestamp(self._stat().st_mtime)

    @property
    def is_hidden(self) -> bool:
        if sys.platform == 'win32':
            return self._has_attribute(stat.FILE_ATTRIBUTE_HIDDEN)
        return self.name.startswith('.')

    @property
    def is_read_only(self) -> bool:
        if sys.platform == 'win32' and self._has_attribute(stat.FILE_ATTRIBUTE_READONLY):
            return True
        return not (self._stat().st_mode & stat.S_IWUSR)

    @property
    def is_system(self) -> bool:
        if sys.platform == 'win32':
            return self._has_attribute(stat.FILE_ATTRIBUTE_SYSTEM)
        return False

    # --- Digests ---

    @property
    def md5(self) -> str:
        return self.digest('md5')

    @property
    def sha1(self) -> str:
        return self.digest('sha1')

    @property
    def sha256(self) -> str:
        return self.digest('sha256')

    @property
    def sha384(self) -> str:
        return self.digest('sha384')

    @property
    def sha512(self) -> str:
        return self.digest('sha512')

    def digest(self, algorithm: str, progress: bool = False) -> str:
        return self._hasher.compute_digest(self._path, algorithm, progress=progress)

    def digests(self, algorithms: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Several digests for the price of one read. Defaults to all supported algorithms."""
        return self._hasher.compute_digests(self._path, algorithms or config.DIGEST_ALGORITHMS)

    def _stat(self) -> os.stat_result:
        return self._path.stat()

    def _has_attribute(self, flag: int) -> bool:
        return bool(getattr(self._stat(), 'st_file_attributes', 0) & flag)
