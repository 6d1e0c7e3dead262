from pathlib import Path
from typing import List, Optional
import os
import shlex

def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value) if value else None

class Config:
    """Global configuration"""
    
    VERSION: str = '0.1.0'
    
    # Explorer API (unified v2 endpoint, chainid parameter selects chain)
    API_URL: str = os.environ.get('ETHERSCAN_API_URL', 'https://api.etherscan.io/v2/api')
    API_KEY: Optional[str] = os.environ.get('ETHERSCAN_API_KEY') or None
    REQUEST_TIMEOUT: int = int(os.environ.get('CLONER_REQUEST_TIMEOUT', '30'))
    
    # Scaffolding
    SCAFFOLD: str = os.environ.get('CLONER_SCAFFOLD', 'forge')
    FORGE_PATH: str = os.environ.get('CLONER_FORGE_PATH', 'forge')
    FORGE_INIT_ARGS: List[str] = shlex.split(os.environ.get('CLONER_FORGE_INIT_ARGS', '--no-commit'))
    SCAFFOLD_TIMEOUT: int = int(os.environ.get('CLONER_SCAFFOLD_TIMEOUT', '300'))
    
    # Layout
    SOURCE_DIR: str = 'src'
    PLACEHOLDER_MARKER: str = 'Counter'
    
    # Logging (file logging only when a directory is configured)
    LOG_DIR: Optional[Path] = _env_path('CLONER_LOG_DIR')
    
    @classmethod
    def reload(cls):
        """Re-read environment overrides (after load_dotenv)"""
        cls.API_URL = os.environ.get('ETHERSCAN_API_URL', cls.API_URL)
        cls.API_KEY = os.environ.get('ETHERSCAN_API_KEY') or cls.API_KEY
        cls.REQUEST_TIMEOUT = int(os.environ.get('CLONER_REQUEST_TIMEOUT', str(cls.REQUEST_TIMEOUT)))
        cls.SCAFFOLD = os.environ.get('CLONER_SCAFFOLD', cls.SCAFFOLD)
        cls.FORGE_PATH = os.environ.get('CLONER_FORGE_PATH', cls.FORGE_PATH)
        if 'CLONER_FORGE_INIT_ARGS' in os.environ:
            cls.FORGE_INIT_ARGS = shlex.split(os.environ['CLONER_FORGE_INIT_ARGS'])
        cls.SCAFFOLD_TIMEOUT = int(os.environ.get('CLONER_SCAFFOLD_TIMEOUT', str(cls.SCAFFOLD_TIMEOUT)))
        cls.LOG_DIR = _env_path('CLONER_LOG_DIR') or cls.LOG_DIR
