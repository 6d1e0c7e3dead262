import logging
import os
from pathlib import Path
from typing import List

from cloner.config import Config
from cloner.errors import FileSystemError

logger = logging.getLogger(__name__)

def _raise_walk_error(error: OSError):
    raise FileSystemError(f"could not walk {error.filename}: {error.strerror or error}")

def clean_placeholders(project_root: Path, marker: str = Config.PLACEHOLDER_MARKER) -> List[Path]:
    """
    Delete scaffold template files (src/Counter.sol, test/Counter.t.sol, ...)
    
    A regular file is removed when its path relative to project_root contains
    marker. Directories are left in place. A directory that cannot be scanned
    fails the run instead of being skipped.
    
    Returns: removed file paths
    """
    project_root = Path(project_root)
    removed = []
    
    # Collect the whole walk first; deleting while walking is unsafe
    candidates = []
    for dirpath, _dirnames, filenames in os.walk(project_root, onerror=_raise_walk_error):
        for filename in filenames:
            path = Path(dirpath) / filename
            if marker in path.relative_to(project_root).as_posix():
                candidates.append(path)
    
    for path in sorted(candidates):
        if path.is_symlink() or not path.is_file():
            continue
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            raise FileSystemError(f"could not remove placeholder {path}: {e}")
        logger.debug(f"removed placeholder {path.relative_to(project_root)}")
        removed.append(path)
    
    return removed
