# reindexer/cli.py
"""
Reindex script for the semantic-search demo.

Reads seed data from scripts/seed-data.json, optionally deletes the existing
documents (--clean), then re-indexes every document via POST /v1/documents.

Usage examples:
  reindex
  reindex --clean
  reindex --seed data/other-seed.json --timeout 30

Exit code is non-zero when any document failed to index or on a fatal error.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import httpx

from .client import DocumentsClient
from .config import DEFAULT_ENV_FILE, load_settings
from .errors import ConfigError, SeedDataError
from .logger import get_logger, setup_logger
from .reindex import run_reindex
from .seed import DEFAULT_SEED_PATH, load_seed_data

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reindex", description="Re-upload the seed documents to the search API")
    parser.add_argument("--clean", action="store_true", help="Delete existing documents before indexing")
    parser.add_argument("--seed", default=str(DEFAULT_SEED_PATH), help=f"Seed data JSON file, default: {DEFAULT_SEED_PATH.name}")
    parser.add_argument("--env-file", default=str(DEFAULT_ENV_FILE), help=f"Dotenv file to load, default: {DEFAULT_ENV_FILE.name}")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout seconds per request, default: wait indefinitely")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every outgoing request")
    return parser


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.BaseTransport] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)
        settings = load_settings(args.env_file)
        timeout = args.timeout if args.timeout is not None else settings.timeout

        print("\n🔄 Reindex Script")
        print(f"   API: {settings.api_url}")
        print(f"   Clean mode: {'yes' if args.clean else 'no'}")
        print("")

        documents = load_seed_data(args.seed)
        print(f"📄 Loaded {len(documents)} documents from {os.path.basename(args.seed)}\n")

        with DocumentsClient(settings.api_url, settings.api_key, timeout=timeout, transport=transport) as client:
            summary = run_reindex(client, documents, clean=args.clean)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        for hint in e.hints:
            print(f"       {hint}", file=sys.stderr)
        return 1
    except SeedDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1

    print("")
    print(f"✅ Done: {summary.indexed} indexed, {summary.failed} failed")
    if args.clean and summary.delete_failed:
        print(f"   ({summary.delete_failed} delete(s) failed)")

    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
