from abc import ABC, abstractmethod
from pathlib import Path

class BaseScaffold(ABC):
    """Abstract project scaffolding interface"""
    
    def __init__(self, timeout: int = 300):
        self.timeout = timeout
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Scaffold tool name"""
        pass
    
    @abstractmethod
    def initialize(self, path: Path) -> None:
        """
        Create the base project skeleton at path and wait for completion.
        Raises ScaffoldError on any failure; never rolls back path.
        """
        pass
    
    def is_available(self) -> bool:
        """Check if tool is installed"""
        import shutil
        return shutil.which(self.name) is not None
