import logging
import time
from pathlib import Path

from cloner.config import Config
from cloner.core.bundle import decode_bundle
from cloner.core.chain import resolve_chain
from cloner.core.cleaner import clean_placeholders
from cloner.core.fetcher import SourceFetcher
from cloner.core.materializer import materialize
from cloner.core.query import build_url
from cloner.core.result import CloneResult
from cloner.errors import ClonerError, DestinationExists, FileSystemError, ScaffoldError
from cloner.tools.base import BaseScaffold

logger = logging.getLogger(__name__)

class ContractCloner:
    """Orchestrates one fetch-decode-materialize run into a fresh project"""
    
    def __init__(self, scaffold: BaseScaffold, fetcher: SourceFetcher, api_url: str = Config.API_URL):
        self.scaffold = scaffold
        self.fetcher = fetcher
        self.api_url = api_url
    
    def clone(self, chain: str, address: str, path: str | Path) -> CloneResult:
        """Clone verified sources of address on chain into a new project at path"""
        start = time.time()
        path = Path(path)
        
        chain_id = resolve_chain(chain)
        logger.info(f"Chain id: {chain_id}")
        logger.info(f"Cloning contract at address {address} to path {path}")
        
        if path.exists() or path.is_symlink():
            raise DestinationExists(f"path already exists: {path}")
        
        if not self.scaffold.is_available():
            raise ScaffoldError(f"{self.scaffold.name} is not installed or not on PATH")
        
        try:
            path.mkdir()
        except OSError as e:
            raise FileSystemError(f"could not create {path}: {e}")
        
        try:
            return self._populate(chain_id, address, path, start)
        except ClonerError as e:
            e.partial_destination = path
            raise
    
    def _populate(self, chain_id: int, address: str, path: Path, start: float) -> CloneResult:
        logger.info(f"Initializing {self.scaffold.name} project...")
        self.scaffold.initialize(path)
        
        url = build_url(chain_id, self.api_url, address)
        logger.info(f"URL: {url}")
        body = self.fetcher.fetch(url)
        
        bundle = decode_bundle(body)
        logger.info(
            f"Decoded {len(bundle)} source files"
            + (f" for {bundle.contract_name}" if bundle.contract_name else "")
            + (f" (compiler {bundle.compiler_version})" if bundle.compiler_version else "")
        )
        
        removed = clean_placeholders(path)
        if removed:
            logger.info(f"Removed {len(removed)} placeholder file(s)")
        
        written = materialize(path, bundle)
        
        return CloneResult(
            chain_id=chain_id,
            address=address,
            path=path,
            url=url,
            execution_time=time.time() - start,
            written=written,
            removed_placeholders=removed,
            contract_name=bundle.contract_name,
            compiler_version=bundle.compiler_version,
        )
