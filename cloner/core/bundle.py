#!/usr/bin/env python3
"""
Decoding of the explorer's getsourcecode payload into a source bundle.

The SourceCode field of a contract verified as Standard JSON Input comes back
with every brace doubled:

    {{"language":"Solidity","sources":{{"src/A.sol":{{"content":"..."}}}}}}

Undoing that is a narrow, explorer-specific heuristic, not an escaping
scheme: every "{{" becomes "{" and every "}}" becomes "}" across the whole
string. It is only correct because the explorer never emits a genuine doubled
brace in the top-level JSON; a doubled brace inside a source file's own text
is collapsed as well. Other encodings (or the single-file case) belong here,
behind decode_bundle, so the materializer never sees them.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from cloner.errors import (
    InvalidSourcePath,
    MalformedEnvelope,
    MalformedSourceObject,
    MissingContent,
    MissingSourceCode,
    MissingSources,
    UnsupportedSingleFileFormat,
)

@dataclass(frozen=True)
class SourceUnit:
    """One source file: slash-separated path under src/ and its raw text"""

    path: str
    content: str

    @property
    def parts(self) -> List[str]:
        return self.path.split('/')

@dataclass
class SourceBundle:
    """Decoded sources keyed by relative path"""

    units: Dict[str, SourceUnit] = field(default_factory=dict)

    # Informational fields from the explorer record
    contract_name: Optional[str] = None
    compiler_version: Optional[str] = None

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[SourceUnit]:
        return iter(self.units.values())

    def to_dict(self) -> Dict[str, str]:
        return {path: unit.content for path, unit in self.units.items()}

def unescape_braces(text: str) -> str:
    """Collapse the explorer's doubled braces"""
    return text.replace('{{', '{').replace('}}', '}')

def check_source_path(path: str) -> str:
    """
    Reject source keys that could write outside the source root.

    Rejected: empty keys, absolute paths, drive anchors (C:), backslashes,
    NUL bytes and any segment equal to "..".
    """
    if not path:
        raise InvalidSourcePath("empty source path")
    if '\x00' in path or '\\' in path:
        raise InvalidSourcePath(f"unsupported characters in source path: {path!r}")
    try:
        path.encode('utf-8')
    except UnicodeEncodeError:
        raise InvalidSourcePath(f"source path is not encodable as UTF-8: {path!r}")
    if path.startswith('/'):
        raise InvalidSourcePath(f"absolute source path: {path}")
    if len(path) >= 2 and path[1] == ':' and path[0].isalpha():
        raise InvalidSourcePath(f"drive-anchored source path: {path}")

    segments = path.split('/')
    if '..' in segments:
        raise InvalidSourcePath(f"source path escapes the source root: {path}")
    if not segments[-1] or segments[-1] == '.':
        raise InvalidSourcePath(f"source path has no file name: {path}")
    return path

def _parse_envelope(raw_body: str) -> Dict[str, Any]:
    """Outer JSON object with a non-empty result array; returns result[0]"""
    try:
        envelope = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedEnvelope(f"response is not valid JSON: {e}")

    if not isinstance(envelope, dict):
        raise MalformedEnvelope("response is not a JSON object")

    result = envelope.get('result')
    if not isinstance(result, list):
        # Explorer errors come back as status "0" with a message in result
        detail = envelope.get('message') or 'no result array'
        if isinstance(result, str) and result:
            detail = f"{detail}: {result}"
        raise MalformedEnvelope(f"explorer error: {detail}")

    if not result:
        raise MalformedEnvelope("explorer returned an empty result array")

    record = result[0]
    if not isinstance(record, dict):
        raise MalformedEnvelope("result entry is not a JSON object")
    return record

def decode_bundle(raw_body: str) -> SourceBundle:
    """
    Decode a raw getsourcecode response into a SourceBundle.

    Every check runs before the caller writes anything, so a failure here
    never leaves partial source files behind.
    """
    record = _parse_envelope(raw_body)

    source_code = record.get('SourceCode')
    if not isinstance(source_code, str):
        raise MissingSourceCode("result has no SourceCode string")
    if not source_code.strip():
        raise MissingSourceCode("contract source code is not verified on the explorer")

    text = unescape_braces(source_code).strip()

    # Flat single-file verification: plain Solidity, no JSON envelope
    if not text.startswith('{'):
        raise UnsupportedSingleFileFormat(
            "contract was verified as a single flat file; only Standard JSON sources can be cloned"
        )

    try:
        source_object = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedSourceObject(f"SourceCode is not valid JSON after unescaping braces: {e}")

    sources = source_object.get('sources')
    if not isinstance(sources, dict):
        raise MissingSources("SourceCode JSON has no 'sources' object")

    bundle = SourceBundle(
        contract_name=record.get('ContractName') or None,
        compiler_version=record.get('CompilerVersion') or None,
    )

    for path, entry in sources.items():
        content = entry.get('content') if isinstance(entry, dict) else None
        if not isinstance(content, str):
            raise MissingContent(f"source '{path}' has no 'content' string")
        try:
            content.encode('utf-8')
        except UnicodeEncodeError as e:
            raise MalformedSourceObject(f"source '{path}' content is not encodable as UTF-8: {e.reason}")
        check_source_path(path)
        bundle.units[path] = SourceUnit(path=path, content=content)

    return bundle
