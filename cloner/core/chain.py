"""
chain token resolution: numeric chain ids or short aliases
"""

from types import MappingProxyType
from typing import Mapping

from cloner.errors import UnknownChain

# alias -> chain id, as accepted by the etherscan v2 chainid parameter
CHAIN_ALIASES: Mapping[str, int] = MappingProxyType({
    'eth': 1,
    'op': 10,
    'bsc': 51,
    'poly': 137,
    'base': 8453,
    'arb': 42161,
    'lin': 59144,
    'linea': 59144,
    'era': 324,
    'zksync': 324,
})

CHAIN_NAMES: Mapping[str, str] = MappingProxyType({
    'eth': 'Ethereum',
    'op': 'Optimism',
    'bsc': 'Binance Smart Chain',
    'poly': 'Polygon',
    'base': 'Base',
    'arb': 'Arbitrum',
    'lin': 'Linea',
    'linea': 'Linea',
    'era': 'ZkSync Era',
    'zksync': 'ZkSync Era',
})

def resolve_chain(token: str) -> int:
    """
    resolve a chain token to a chain id
    
    args:
        token: decimal chain id ("137") or alias ("poly"), case-sensitive
    
    returns:
        chain id; numeric tokens are taken as-is without checking known networks
    """
    # a leading "+" is allowed; negative numbers are not chain ids
    digits = token[1:] if token.startswith('+') else token
    if digits.isascii() and digits.isdigit():
        return int(digits)
    
    chain_id = CHAIN_ALIASES.get(token)
    if chain_id is None:
        raise UnknownChain(
            f"unknown chain '{token}': use a numeric chain id or one of {', '.join(CHAIN_ALIASES)}"
        )
    return chain_id

def describe_aliases() -> str:
    """help text listing every alias and its network"""
    lines = ["You can specify the chain by id or by alias, supported aliases are:"]
    for alias, name in CHAIN_NAMES.items():
        lines.append(f"  {alias}: {name} ({CHAIN_ALIASES[alias]})")
    return "\n".join(lines)
