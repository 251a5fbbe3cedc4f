#!/usr/bin/env python3
"""
Key generation tool for boxcrypt.

Usage:
    boxcrypt-keygen keypair [--format json|env]
    boxcrypt-keygen shared [--format json|env]
    boxcrypt-keygen pubkey PRIVATE_KEY
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..crypto.errors import BoxcryptError
from ..crypto.keypair import derive_public_key, generate_key_pair, generate_shared_key


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog='boxcrypt-keygen', description='boxcrypt key generator')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')

    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    keypair_parser = subparsers.add_parser('keypair',
                                           help='Generate an X25519 key pair (base64)')
    keypair_parser.add_argument('--format', choices=['json', 'env'], default='json',
                                help='Output format (default: json)')

    shared_parser = subparsers.add_parser('shared',
                                          help='Generate a 256-bit shared key (hex)')
    shared_parser.add_argument('--format', choices=['json', 'env'], default='json',
                               help='Output format (default: json)')

    pubkey_parser = subparsers.add_parser('pubkey',
                                          help='Print the public key of a base64 private key')
    pubkey_parser.add_argument('private_key', help='Base64 private key')

    return parser


def _render(values: dict, output_format: str) -> str:
    if output_format == 'env':
        return "\n".join(f"{name.upper()}={value}" for name, value in values.items())
    return json.dumps(values, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the key generator."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s %(levelname)s: %(message)s')

    try:
        if args.command == 'keypair':
            pair = generate_key_pair()
            print(_render({'public_key': pair.public_key, 'private_key': pair.private_key},
                          args.format))
        elif args.command == 'shared':
            print(_render({'shared_key': generate_shared_key()}, args.format))
        elif args.command == 'pubkey':
            print(derive_public_key(args.private_key))
    except BoxcryptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
