import os
import shutil
import logging
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .. import config
from ..exceptions import (
    FileAlreadyExistsError,
    FileMissingError,
    FileOperationError,
    InvalidPathError,
    SuffixExhaustedError,
)
from ..models import CopyResult, CopyStatus
from ..scanning.compare import files_are_equal
from ..scanning.filesystem import extension_of, is_valid_path, split_extension

PathArg = Union[str, PathLike]


def _is_blank(value: Optional[PathArg]) -> bool:
    return value is None or not os.fspath(value).strip()


def rename_file(file_path: Optional[PathArg], new_name: Optional[str]) -> Optional[Path]:
    """
    Renames a file within its directory, keeping the original extension.

    Returns the new path, or None when either argument is blank (no-op).
    Never overwrites: an existing target raises FileAlreadyExistsError.
    """
    if _is_blank(file_path) or _is_blank(new_name):
        return None

    src = Path(file_path)
    if not src.is_file():
        raise FileMissingError("File not found.", path=str(file_path))

    dest = src.parent / (new_name.strip() + extension_of(src))
    context = f"Failed renaming file old: {src}, new: {dest}"

    if dest.exists():
        raise FileAlreadyExistsError(f"{context}: File '{dest}' already exists.", path=str(dest))

    try:
        src.rename(dest)
    except OSError as e:
        raise FileOperationError(f"{context}: {e}", path=str(src)) from e

    logging.info(f"Renamed {src} -> {dest}")
    return dest


def ensure_directory_exists(path: PathArg) -> None:
    """Creates path (and parents) if missing. Idempotent."""
    folder = Path(path)
    try:
        if not folder.is_dir():
            folder.mkdir(parents=True, exist_ok=True)
            logging.debug(f"Created directory {folder}")
    except OSError as e:
        raise FileOperationError(f"Failed creating directory: {path} -> {e}", path=str(path)) from e


def delete_file(path: PathArg) -> None:
    """Deletes the file if present. Idempotent."""
    target = Path(path)
    try:
        if target.is_file():
            target.unlink()
            logging.info(f"Deleted {target}")
    except OSError as e:
        raise FileOperationError(f"Failed deleting file: {path} -> {e}", path=str(path)) from e


def copy_file(source_path: PathArg,
              target_path: PathArg,
              overwrite: bool,
              suffix: int = 0) -> CopyResult:
    """
    Copies source_path to target_path and reports where it actually landed.

    With overwrite=False an occupied target is never replaced. Instead the
    source name gets a numeric suffix, `<stem>_<n><ext>`, and the loop
    repeats until a free name is found. Before each step the source is
    compared byte-for-byte with the file in the way; when they are identical
    the candidate is marked `<stem>_equal_<n><ext>`. A single counter is
    shared by equal and non-equal collisions.

    Args:
        suffix: Starting value for the counter (first candidate is suffix+1).

    Raises:
        FileMissingError: source does not exist.
        InvalidPathError: target directory is blank or malformed.
        SuffixExhaustedError: counter passed config.MAX_COPY_SUFFIX.
        FileOperationError: the copy itself failed.
    """
    src = Path(source_path) if not _is_blank(source_path) else None
    if src is None or not src.is_file():
        raise FileMissingError("Source file missing", path=None if src is None else str(src))

    target_dir = os.path.dirname(os.fspath(target_path)) if target_path is not None else ''
    if not is_valid_path(target_dir):
        raise InvalidPathError("Target folder path is invalid", path=target_dir)
    ensure_directory_exists(target_dir)

    dest = Path(target_path)
    status = CopyStatus.COPIED

    if overwrite:
        if dest.is_file():
            status = CopyStatus.OVERWRITTEN
    else:
        stem, ext = split_extension(src.name)
        while dest.is_file():
            are_equal = files_are_equal(src, dest)
            suffix += 1
            if suffix > config.MAX_COPY_SUFFIX:
                raise SuffixExhaustedError(
                    f"Failed to find a free suffix for file {src.name} "
                    f"after {config.MAX_COPY_SUFFIX} attempts",
                    path=str(src),
                )

            name = stem
            if are_equal and not name.endswith(config.EQUAL_MARKER):
                name += config.EQUAL_MARKER
            candidate = Path(target_dir) / f"{name}_{suffix}{ext}"
            logging.debug(f"Target {dest} taken (equal={are_equal}), trying {candidate}")

            dest = candidate
            status = CopyStatus.RENAMED_EQUAL if are_equal else CopyStatus.RENAMED

    if dest.is_dir():
        raise FileOperationError(
            f"Failed copying file: {src} -> {dest}: target is a directory", path=str(dest))

    try:
        # Name may have been claimed since the loop checked it
        if not overwrite and dest.exists():
            raise FileExistsError(f"File '{dest}' already exists.")
        shutil.copy2(src, dest)
    except FileExistsError as e:
        raise FileAlreadyExistsError(f"Failed copying file: {src} -> {dest}: {e}", path=str(dest)) from e
    except OSError as e:
        raise FileOperationError(f"Failed copying file: {src} -> {dest}: {e}", path=str(dest)) from e

    logging.info(f"Copied {src} -> {dest} ({status.value})")
    return CopyResult(path=dest, status=status, suffix=suffix)
