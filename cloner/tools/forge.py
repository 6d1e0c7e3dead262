#!/usr/bin/env python3
"""
Foundry scaffolding: `forge init <path>` before real sources are written in
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from cloner.config import Config
from cloner.errors import ScaffoldError
from cloner.tools.base import BaseScaffold

logger = logging.getLogger(__name__)

class ForgeScaffold(BaseScaffold):
    
    def __init__(self, timeout: int = Config.SCAFFOLD_TIMEOUT, executable: Optional[str] = None,
                 init_args: Optional[List[str]] = None):
        super().__init__(timeout)
        self.executable = executable or Config.FORGE_PATH
        self.init_args = list(init_args) if init_args is not None else list(Config.FORGE_INIT_ARGS)
    
    @property
    def name(self) -> str:
        return "forge"
    
    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None
    
    def initialize(self, path: Path) -> None:
        cmd = [self.executable, 'init', str(path), *self.init_args]
        logger.debug(f"Executing: {' '.join(cmd)}")
        
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError:
            raise ScaffoldError(f"{self.executable} not found; install Foundry (https://getfoundry.sh)")
        except subprocess.TimeoutExpired:
            raise ScaffoldError(f"forge init timed out after {self.timeout}s")
        except OSError as e:
            raise ScaffoldError(f"could not run {self.executable}: {e}")
        
        if result.stdout:
            logger.debug(result.stdout.rstrip())
        
        if result.returncode != 0:
            detail = (result.stderr or result.stdout or '').strip().splitlines()
            tail = detail[-1] if detail else 'no output'
            raise ScaffoldError(f"forge init exited with code {result.returncode}: {tail}")
