#!/usr/bin/env python
"""
Write the sample staff records and transactions to the data file.

Usage:
    python scripts/seed_sample_data.py                  # Seed the configured data file
    python scripts/seed_sample_data.py --force          # Overwrite an existing data file
    python scripts/seed_sample_data.py --config my.yaml # Use another config file
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from transact.logic import messages
from transact.storage import JsonTransactBookStorage, get_sample_transact_book
from transact.utils.config_loader import load_config, get_storage_path
from transact.utils.errors import TransactError


def print_header(title: str):
    """Print formatted section header"""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def seed(data_file: Path, force: bool = False) -> bool:
    """
    Write the sample book to data_file

    Returns:
        True if the file was written
    """
    if data_file.exists() and not force:
        print(f"❌ Data file already exists: {data_file} (use --force to overwrite)")
        return False

    book = get_sample_transact_book()
    JsonTransactBookStorage(data_file).save_transact_book(book)

    print_header("Sample Data Written")
    print(f"📁 Data File: {data_file.absolute()}")
    print(f"\n👥 Staff ({len(book.persons)}):")
    for person in book.persons:
        print(f"  • {messages.format_person(person)}")
    print(f"\n💰 Transactions ({len(book.transactions)}):")
    for transaction in book.transactions:
        print(f"  • {messages.format_transaction(transaction)}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Seed Transact with sample data")
    parser.add_argument("--config", default=None, help="Path to the YAML config file")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing data file")
    args = parser.parse_args()

    try:
        config = load_config(args.config)
        written = seed(get_storage_path(config), force=args.force)
    except TransactError as e:
        print(f"❌ {e}")
        sys.exit(1)

    sys.exit(0 if written else 1)


if __name__ == "__main__":
    main()
