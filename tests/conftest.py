import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import pytest


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> bool:
    try:
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        link.unlink()
        target.rmdir()
        return True
    except (OSError, NotImplementedError):
        return False


def _create_files_with_times(directory: Path, names: list[str], base_time: Optional[float] = None) -> list[Path]:
    base = time.time() - 3600 if base_time is None else base_time
    files: list[Path] = []
    for idx, name in enumerate(names):
        f = directory / name
        f.write_text(f"content of {name}\n" * (idx + 1))
        ts = base + idx * 60
        os.utime(f, (ts, ts))
        files.append(f)
    return files


@pytest.fixture
def create_files() -> Callable[..., list[Path]]:
    """Factory for files with strictly increasing mtimes (first name is the oldest, 60 s apart)."""
    return _create_files_with_times
