from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CopyStatus(Enum):
    COPIED = 'copied'                # requested target was free
    OVERWRITTEN = 'overwritten'      # existing target replaced
    RENAMED = 'renamed'              # suffixed name, content differed
    RENAMED_EQUAL = 'renamed_equal'  # suffixed name, content identical


@dataclass(frozen=True)
class CopyResult:
    """
    Outcome of copy_file(). `path` is where the data actually landed,
    which may differ from the requested target.
    """
    path: Path
    status: CopyStatus
    suffix: int = 0

    @property
    def renamed(self) -> bool:
        return self.status in (CopyStatus.RENAMED, CopyStatus.RENAMED_EQUAL)
