import os
import logging
from os import PathLike
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from .. import config
from ..exceptions import FileMissingError

PathArg = Union[str, PathLike]


def iter_files(folder: PathArg, recursive: bool) -> Iterator[Path]:
    """
    Depth-first walker using os.scandir for speed.

    Files in a directory are yielded before descending into its children.
    Directory symlinks are not followed (avoids cycles); file symlinks are listed.
    """
    root = Path(folder)
    if not root.is_dir():
        raise FileMissingError(f"Folder not found: {root}", path=str(root))

    stack = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError:
            logging.warning(f"Cannot read directory: {current}")
            continue

        # Sort for stable traversal order
        entries.sort(key=lambda e: e.name.lower())

        dirs = []
        for e in entries:
            if e.is_dir(follow_symlinks=False):
                dirs.append(Path(e.path))
            elif e.is_file():
                yield Path(e.path)

        if recursive:
            # Push reversed so A is processed before Z
            for d in reversed(dirs):
                stack.append(d)


def split_extension(name: str) -> Tuple[str, str]:
    """
    Splits a file name at its last dot into (stem, extension).

    A leading dot counts, so ".gitignore" is ("", ".gitignore"). A trailing
    dot yields no extension: "notes." is ("notes", "").
    """
    idx = name.rfind('.')
    if idx == -1:
        return name, ''
    ext = name[idx:] if idx < len(name) - 1 else ''
    return name[:idx], ext


def extension_of(path: PathArg) -> str:
    return split_extension(Path(path).name)[1]


def _matches(extension: str, filter: Optional[Sequence[Optional[str]]]) -> bool:
    if not filter:
        return True
    ext = extension.lower()
    for entry in filter:
        # A blank entry is a wildcard and admits every file
        if entry is None or not entry.strip() or entry.lower() == ext:
            return True
    return False


def get_all_file_extensions(folder: PathArg, recursive: bool) -> Set[str]:
    """Distinct extensions (".txt", or "" for none) of every file under folder."""
    return {extension_of(p) for p in iter_files(folder, recursive)}


def get_all_file_paths(folder: PathArg,
                       recursive: bool,
                       filter: Optional[Sequence[Optional[str]]] = None) -> List[str]:
    """
    Full paths of files under folder, optionally restricted to the given extensions.

    Args:
        filter: Extensions such as [".txt", ".JPG"] (case-insensitive).
                None or [] includes everything, as does any blank entry.
    """
    return [str(p) for p in iter_files(folder, recursive) if _matches(extension_of(p), filter)]


def get_all_file_names(folder: PathArg,
                       recursive: bool,
                       filter: Optional[Sequence[Optional[str]]] = None) -> List[str]:
    """Same selection as get_all_file_paths, but only the final name component."""
    return [p.name for p in iter_files(folder, recursive) if _matches(extension_of(p), filter)]


def get_file_name(path: PathArg) -> str:
    return Path(path).name


def is_valid_path(path: Optional[PathArg]) -> bool:
    """False for blank paths or paths containing characters the platform rejects."""
    if path is None:
        return False
    text = os.fspath(path)
    if not text.strip():
        return False
    return not any(ch in config.INVALID_PATH_CHARS for ch in text)
