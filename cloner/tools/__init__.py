from typing import Dict, Type, Optional
from cloner.tools.base import BaseScaffold
from cloner.tools.forge import ForgeScaffold

# Registry of available scaffolds
SCAFFOLDS: Dict[str, Type[BaseScaffold]] = {
    'forge': ForgeScaffold,
}

def get_scaffold(name: str, timeout: int) -> Optional[BaseScaffold]:
    """Get scaffold instance by name"""
    scaffold_class = SCAFFOLDS.get(name)
    if scaffold_class:
        return scaffold_class(timeout=timeout)
    return None
