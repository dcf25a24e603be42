import hashlib
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from tqdm import tqdm

from .. import config


class FileHasher:
    def compute_digest(self, path: Path, algorithm: str, progress: bool = False) -> str:
        """
        Streams the whole file through `algorithm` and returns the lowercase hex digest.
        Nothing is cached: every call pays the full read.
        """
        return self.compute_digests(path, (algorithm,), progress=progress)[algorithm]

    def compute_digests(self,
                        path: Path,
                        algorithms: Iterable[str],
                        progress: bool = False) -> Dict[str, str]:
        """
        Computes several digests in a single pass over the file.

        Args:
            algorithms: Names from config.DIGEST_ALGORITHMS.
            progress: Show a byte-level progress bar (useful for multi-GB files).
        """
        hashers = {name: self._new_hash(name) for name in algorithms}
        total = path.stat().st_size if progress else None

        with open(path, 'rb') as f, tqdm(total=total, unit='B', unit_scale=True,
                                         desc=path.name, disable=not progress,
                                         leave=False) as bar:
            while chunk := f.read(config.HASH_CHUNK_SIZE):
                for h in hashers.values():
                    h.update(chunk)
                bar.update(len(chunk))

        logging.debug(f"Hashed {path} ({', '.join(hashers)})")
        return {name: h.hexdigest() for name, h in hashers.items()}

    def _new_hash(self, name: str):
        algo = self._normalize(name)
        if algo is None:
            raise ValueError(f"Unsupported digest algorithm: {name!r}")
        return hashlib.new(algo)

    @staticmethod
    def _normalize(name: str) -> Optional[str]:
        # Accept "SHA-256", "sha256", "Sha256" alike
        algo = name.lower().replace('-', '')
        return algo if algo in config.DIGEST_ALGORITHMS else None
