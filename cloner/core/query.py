def build_url(chain_id: int, base_url: str, address: str) -> str:
    """Build the getsourcecode request URL; address is passed through unescaped"""
    return (
        f"{base_url}?chainid={chain_id}"
        f"&module=contract&action=getsourcecode&address={address}"
    )
