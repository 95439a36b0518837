#!/usr/bin/env python3
"""Command-line entry point: resolves one did:com DID and prints the result."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import properties_from_environment
from .constants import EXIT_FAILURE, EXIT_SUCCESS, NETWORK_KEY_IN_PROPERTIES, SAMPLE_DID
from .driver import DidComDriver
from .errors import DriverError

logger = logging.getLogger(__name__)

def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="did:com resolver driver")
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', required=True, help='Command to execute')

    resolve_parser = subparsers.add_parser('resolve', help='Resolve a did:com DID to its document')
    resolve_parser.add_argument('did', nargs='?', default=SAMPLE_DID,
                                help=f'DID to resolve (default: {SAMPLE_DID})')
    resolve_parser.add_argument('--network', help='Commercio network endpoint to contact')

    return parser.parse_args(argv)


def resolve_did_document(did: str, network: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Resolve a DID; None when it is not a did:com DID."""
    properties = properties_from_environment()
    if network:
        properties[NETWORK_KEY_IN_PROPERTIES] = network

    result = DidComDriver(properties).resolve(did, {})
    if result is None:
        logger.info(f"{did} is not a did:com DID")
        return None
    return result.serialize()


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    try:
        args = parse_args(argv)
        setup_logging(args.verbose)

        if args.command == 'resolve':
            result = resolve_did_document(args.did, args.network)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return EXIT_FAILURE

        print(json.dumps(result, indent=2))
        return EXIT_SUCCESS

    except DriverError as e:
        print(json.dumps({"error": str(e)}, indent=2))
        return EXIT_FAILURE
    except Exception as e:
        print(json.dumps({"error": f"Unexpected error: {e}"}, indent=2))
        logger.exception("Unexpected error occurred")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
