from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

@dataclass
class CloneResult:
    """Outcome of one clone run"""
    
    chain_id: int
    address: str
    path: Path
    url: str
    execution_time: float  # seconds
    
    written: List[Path] = field(default_factory=list)
    removed_placeholders: List[Path] = field(default_factory=list)
    contract_name: Optional[str] = None
    compiler_version: Optional[str] = None
    
    def summary(self) -> str:
        name = self.contract_name or self.address
        return (
            f"cloned {name} ({len(self.written)} files) to {self.path / 'src'} "
            f"in {self.execution_time:.2f}s"
        )
