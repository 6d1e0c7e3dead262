import logging
from pathlib import Path
from typing import List

from cloner.config import Config
from cloner.core.bundle import SourceBundle, SourceUnit, check_source_path
from cloner.errors import FileSystemError, InvalidSourcePath

logger = logging.getLogger(__name__)

def _destination(src_root: Path, unit: SourceUnit) -> Path:
    """Directory segments applied in order under src_root, then the file name"""
    check_source_path(unit.path)
    *dirs, name = unit.parts
    dest = src_root.joinpath(*dirs, name)
    
    # Symlinks left by the scaffold could still redirect a safe-looking key
    root_res = src_root.resolve()
    if root_res not in dest.resolve().parents:
        raise InvalidSourcePath(f"source path escapes {src_root}: {unit.path}")
    return dest

def materialize(project_root: Path, bundle: SourceBundle) -> List[Path]:
    """
    Write every source unit to project_root/src/<path>
    
    Intermediate directories are created as needed; existing files are
    overwritten. Content is written as UTF-8 bytes with no newline
    translation. Not transactional: files written before a failure stay.
    
    Returns: written file paths
    """
    src_root = Path(project_root) / Config.SOURCE_DIR
    written = []
    
    for unit in bundle:
        try:
            src_root.mkdir(parents=True, exist_ok=True)
            dest = _destination(src_root, unit)
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(unit.content.encode('utf-8'))
        except (OSError, UnicodeEncodeError) as e:
            raise FileSystemError(f"could not write {unit.path}: {e}")
        
        logger.debug(f"wrote {Config.SOURCE_DIR}/{unit.path} ({len(unit.content)} chars)")
        written.append(dest)
    
    return written
