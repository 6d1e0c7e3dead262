import json

import pytest

from conftest import FakeFetcher, FakeScaffold
from cloner.core.cloner import ContractCloner
from cloner.errors import (
    DestinationExists,
    InvalidSourcePath,
    MalformedEnvelope,
    MalformedSourceObject,
    NetworkError,
    ScaffoldError,
    UnknownChain,
)

API_URL = "https://api.etherscan.io/v2/api"
SOURCES = {
    'src/Token.sol': 'contract Token { }\n',
    'lib/openzeppelin-contracts/contracts/token/ERC20/ERC20.sol': 'contract ERC20 { }\n',
}

def test_clone_end_to_end(tmp_path, explorer_body):
    dest = tmp_path / 'token'
    scaffold = FakeScaffold()
    fetcher = FakeFetcher(explorer_body(SOURCES))
    
    result = ContractCloner(scaffold, fetcher, api_url=API_URL).clone('poly', '0xABC', dest)
    
    assert scaffold.calls == [dest]
    assert fetcher.urls == [f"{API_URL}?chainid=137&module=contract&action=getsourcecode&address=0xABC"]
    assert (dest / 'src' / 'src' / 'Token.sol').read_text() == SOURCES['src/Token.sol']
    assert (dest / 'src' / 'lib' / 'openzeppelin-contracts' / 'contracts' / 'token' / 'ERC20' / 'ERC20.sol').exists()
    assert not (dest / 'src' / 'Counter.sol').exists()
    assert not (dest / 'test' / 'Counter.t.sol').exists()
    assert (dest / 'foundry.toml').exists()
    
    assert result.chain_id == 137
    assert result.contract_name == 'Token'
    assert len(result.written) == 2
    assert len(result.removed_placeholders) == 3
    assert 'Token' in result.summary()

def test_source_named_counter_survives_cleanup(tmp_path, explorer_body):
    dest = tmp_path / 'counter'
    body = explorer_body({'Counter.sol': 'contract Counter { uint n; }'})
    
    ContractCloner(FakeScaffold(), FakeFetcher(body), api_url=API_URL).clone('1', '0xABC', dest)
    
    assert (dest / 'src' / 'Counter.sol').read_text() == 'contract Counter { uint n; }'

def test_existing_destination_is_untouched(tmp_path, explorer_body, tree_snapshot):
    dest = tmp_path / 'existing'
    dest.mkdir()
    (dest / 'keep.txt').write_text('keep')
    before = tree_snapshot(tmp_path)
    scaffold = FakeScaffold()
    fetcher = FakeFetcher(explorer_body(SOURCES))
    
    with pytest.raises(DestinationExists) as exc:
        ContractCloner(scaffold, fetcher).clone('eth', '0xABC', dest)
    
    assert exc.value.partial_destination is None
    assert tree_snapshot(tmp_path) == before
    assert scaffold.calls == []
    assert fetcher.urls == []

def test_existing_file_destination(tmp_path):
    dest = tmp_path / 'file'
    dest.write_text('x')
    
    with pytest.raises(DestinationExists):
        ContractCloner(FakeScaffold(), FakeFetcher('{}')).clone('eth', '0xABC', dest)

def test_unknown_chain_has_no_side_effects(tmp_path):
    dest = tmp_path / 'never'
    
    with pytest.raises(UnknownChain):
        ContractCloner(FakeScaffold(), FakeFetcher('{}')).clone('mainnet', '0xABC', dest)
    
    assert not dest.exists()

def test_unavailable_scaffold_creates_nothing(tmp_path):
    class MissingScaffold(FakeScaffold):
        def is_available(self):
            return False
    
    dest = tmp_path / 'never'
    with pytest.raises(ScaffoldError):
        ContractCloner(MissingScaffold(), FakeFetcher('{}')).clone('eth', '0xABC', dest)
    assert not dest.exists()

def test_scaffold_failure_leaves_destination(tmp_path):
    dest = tmp_path / 'broken'
    fetcher = FakeFetcher('{}')
    
    with pytest.raises(ScaffoldError) as exc:
        ContractCloner(FakeScaffold(fail=True), fetcher).clone('eth', '0xABC', dest)
    
    assert dest.is_dir()
    assert exc.value.partial_destination == dest
    assert fetcher.urls == []

@pytest.mark.parametrize("body", ['not json', json.dumps({'status': '1', 'result': []})])
def test_malformed_envelope_writes_no_sources(tmp_path, tree_snapshot, body):
    dest = tmp_path / 'project'
    
    with pytest.raises(MalformedEnvelope) as exc:
        ContractCloner(FakeScaffold(), FakeFetcher(body)).clone('eth', '0xABC', dest)
    
    # Scaffold output only, placeholders not yet removed
    assert set(tree_snapshot(dest)) == set(FakeScaffold.TEMPLATE_FILES)
    assert exc.value.partial_destination == dest

def test_network_error_propagates(tmp_path):
    dest = tmp_path / 'project'
    
    with pytest.raises(NetworkError) as exc:
        ContractCloner(FakeScaffold(), FakeFetcher(error=NetworkError('down'))).clone('eth', '0xABC', dest)
    assert exc.value.partial_destination == dest

def test_unsafe_source_path_writes_nothing(tmp_path, explorer_body, tree_snapshot):
    dest = tmp_path / 'project'
    body = explorer_body({'A.sol': 'a', '../../escape.sol': 'x'})
    
    with pytest.raises(InvalidSourcePath):
        ContractCloner(FakeScaffold(), FakeFetcher(body)).clone('eth', '0xABC', dest)
    
    assert not (tmp_path / 'escape.sol').exists()
    assert not (dest / 'src' / 'A.sol').exists()

def test_unencodable_content_writes_no_sources(tmp_path, explorer_body):
    dest = tmp_path / 'project'
    body = explorer_body({'A.sol': 'ok', 'B.sol': 'bad \ud800'})
    
    with pytest.raises(MalformedSourceObject):
        ContractCloner(FakeScaffold(), FakeFetcher(body)).clone('eth', '0xABC', dest)
    
    assert not (dest / 'src' / 'A.sol').exists()
    assert not (dest / 'src' / 'B.sol').exists()
