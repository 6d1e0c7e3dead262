#!/usr/bin/env python3
"""Verified contract cloner CLI"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cloner.config import Config
from cloner.core.chain import describe_aliases
from cloner.core.cloner import ContractCloner
from cloner.core.fetcher import SourceFetcher
from cloner.errors import ClonerError
from cloner.tools import get_scaffold
from cloner.utils.logger import setup_logger

def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog='contract-cloner',
        description='Clone the verified sources of a deployed contract into a new Foundry project',
        epilog=describe_aliases(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    
    parser.add_argument('chain', help='Chain id or alias, for more info see below')
    parser.add_argument('address', help='Address of the contract to clone')
    parser.add_argument('path', help='Path to clone the contract to (must not exist)')
    
    parser.add_argument('--api-key', default=Config.API_KEY,
                       help='etherscan api key (or ETHERSCAN_API_KEY in env / .env)')
    parser.add_argument('--api-url', default=Config.API_URL,
                       help=f'explorer api endpoint (default: {Config.API_URL})')
    parser.add_argument('--timeout', type=int, default=Config.REQUEST_TIMEOUT,
                       help='request timeout in seconds')
    parser.add_argument('--verbose', '-v', action='store_true')
    parser.add_argument('--version', action='version', version=f"%(prog)s {Config.VERSION}")
    
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    Config.reload()
    
    args = parse_args(argv)
    logger = setup_logger(
        'cloner',
        log_dir=Config.LOG_DIR,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    
    scaffold = get_scaffold(Config.SCAFFOLD, Config.SCAFFOLD_TIMEOUT)
    if scaffold is None:
        logger.error(f"unknown scaffold '{Config.SCAFFOLD}'")
        return 1
    
    fetcher = SourceFetcher(api_key=args.api_key, timeout=args.timeout)
    cloner = ContractCloner(scaffold, fetcher, api_url=args.api_url)
    
    try:
        result = cloner.clone(args.chain, args.address, args.path)
    except ClonerError as e:
        logger.error(f"{type(e).__name__}: {e.message}")
        if e.partial_destination is not None:
            logger.warning(f"destination {e.partial_destination} left in partial state")
        return e.exit_code
    
    logger.info(result.summary())
    return 0

if __name__ == '__main__':
    sys.exit(main())
