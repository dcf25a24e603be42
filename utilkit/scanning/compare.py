from os import PathLike
from pathlib import Path
from typing import Union

from .. import config
from ..exceptions import FileMissingError


def files_are_equal(path_a: Union[str, PathLike],
                    path_b: Union[str, PathLike],
                    buffer_size: int = config.COMPARE_BUFFER_SIZE) -> bool:
    """
    Byte-for-byte comparison of two files.

    Sizes are compared first, so files of different length are rejected
    without being opened. Each call uses its own read handles, so disjoint
    pairs can be compared from several threads.
    """
    a, b = Path(path_a), Path(path_b)
    if not a.is_file() or not b.is_file():
        missing = a if not a.is_file() else b
        raise FileMissingError("At least one file not found!", path=str(missing))

    if a.stat().st_size != b.stat().st_size:
        return False

    with open(a, 'rb') as fa, open(b, 'rb') as fb:
        while True:
            chunk_a = fa.read(buffer_size)
            chunk_b = fb.read(buffer_size)
            if chunk_a != chunk_b:
                return False
            if not chunk_a:
                return True
