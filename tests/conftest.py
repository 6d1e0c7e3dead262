import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from cloner.errors import ScaffoldError
from cloner.tools.base import BaseScaffold

def double_braces(text: str) -> str:
    return text.replace('{', '{{').replace('}', '}}')

def envelope(source_code, **record) -> str:
    record.setdefault('ContractName', 'Token')
    record.setdefault('CompilerVersion', 'v0.8.20+commit.a1b79de6')
    record['SourceCode'] = source_code
    return json.dumps({'status': '1', 'message': 'OK', 'result': [record]})

def standard_json(sources: Dict[str, str]) -> dict:
    return {
        'language': 'Solidity',
        'sources': {path: {'content': content} for path, content in sources.items()},
        'settings': {'optimizer': {'enabled': True, 'runs': 200}},
    }

@pytest.fixture
def explorer_body():
    """Build a getsourcecode response with every brace doubled"""
    def build(sources: Dict[str, str], **record) -> str:
        return envelope(double_braces(json.dumps(standard_json(sources))), **record)
    return build

class FakeScaffold(BaseScaffold):
    """Writes the files forge init would leave behind, without spawning forge"""
    
    TEMPLATE_FILES = {
        'foundry.toml': '[profile.default]\nsrc = "src"\n',
        'src/Counter.sol': 'contract Counter {}\n',
        'test/Counter.t.sol': 'contract CounterTest {}\n',
        'script/Counter.s.sol': 'contract CounterScript {}\n',
        'lib/forge-std/src/Test.sol': 'abstract contract Test {}\n',
    }
    
    def __init__(self, fail: bool = False):
        super().__init__(timeout=1)
        self.fail = fail
        self.calls: List[Path] = []
    
    @property
    def name(self) -> str:
        return "fake"
    
    def is_available(self) -> bool:
        return True
    
    def initialize(self, path: Path) -> None:
        self.calls.append(Path(path))
        if self.fail:
            raise ScaffoldError("fake scaffold failed")
        for rel, content in self.TEMPLATE_FILES.items():
            dest = Path(path) / rel
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content)

class FakeFetcher:
    def __init__(self, body: Optional[str] = None, error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.urls: List[str] = []
    
    def fetch(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body

@pytest.fixture
def fake_scaffold():
    return FakeScaffold()

@pytest.fixture
def make_fetcher():
    return FakeFetcher

def snapshot(root: Path) -> Dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in root.rglob('*') if p.is_file()
    }

@pytest.fixture
def tree_snapshot():
    return snapshot
