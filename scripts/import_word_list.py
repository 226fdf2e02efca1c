"""
Import a plain-text file as a shared word list.

This script:
1. Reads the text file and splits it into words
2. Validates name, author, description and words with the API rules
3. Inserts the list into the MongoDB datasets collection

Usage:
    python -m scripts.import_word_list FILE --name NAME --username USER [--description TEXT] [--dry-run]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from core import dataset_service
from core.errors import DatasetError
from core.schemas import validate_dataset_payload
from core.word_parser import parse_words_or_raise
from core.word_source import decode_upload

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)


def import_word_list(
    path: Path,
    name: str,
    username: str,
    description: str | None = None,
    dry_run: bool = False,
) -> int:
    """
    Import one word file.

    Args:
        path: Plain-text file to import
        name: List name
        username: Author shown in the library
        description: Optional description
        dry_run: If True, validate only and don't insert

    Returns:
        Process exit code (0 on success)
    """
    if not path.exists():
        print(f"✗ File not found: {path}")
        return 1

    try:
        words = parse_words_or_raise(decode_upload(path.read_bytes()), source="file")
        payload = {
            "name": name,
            "username": username,
            "description": description,
            "words": words,
        }
        print(f"Loaded {len(words)} words from {path}")

        if dry_run:
            validate_dataset_payload(payload)
            print("\n⚠ DRY RUN MODE - List is valid, nothing was inserted")
            return 0

        dataset = dataset_service.create_dataset(payload)
    except DatasetError as exc:
        print(f"✗ {exc.message}")
        return 1

    print(f"✓ Inserted \"{dataset.name}\" ({dataset.word_count} words) as {dataset.id}")
    return 0


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")

    parser = argparse.ArgumentParser(description="Import a word file into the shared library")
    parser.add_argument("file", type=Path, help="Plain-text file with the words")
    parser.add_argument("--name", required=True, help="List name")
    parser.add_argument("--username", required=True, help="Author name")
    parser.add_argument("--description", default=None, help="Optional description")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate only, don't insert into MongoDB"
    )

    args = parser.parse_args()

    sys.exit(import_word_list(
        path=args.file,
        name=args.name,
        username=args.username,
        description=args.description,
        dry_run=args.dry_run,
    ))


if __name__ == "__main__":
    main()
