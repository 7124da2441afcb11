#!/usr/bin/env python3
"""Print a batch of generated sample accounts.

Accounts alternate between savings and current. Output is either the
usual detail blocks or a JSON array.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_accounts.config import BankAccountsConfig
from bank_accounts.generators import SampleAccountGenerator
from bank_accounts.logging import setup_logging
from bank_accounts.serialization import account_to_dict

logger = logging.getLogger(__name__)


def main() -> int:
    config = BankAccountsConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate sample bank accounts")
    parser.add_argument("--count", type=int, default=4, help="Number of accounts (default: 4)")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument("--locale", type=str, default=config.locale, help="Faker locale")
    parser.add_argument("--json", action="store_true", help="Print accounts as JSON")
    args = parser.parse_args()

    setup_logging(
        level=config.logging.level,
        format_type=config.logging.format_type,
        stream=sys.stderr,
    )

    generator = SampleAccountGenerator(seed=args.seed, locale=args.locale)
    accounts = list(generator.generate_batch(args.count))
    logger.info("Generated %d accounts (seed=%s)", len(accounts), args.seed)

    if args.json:
        print(json.dumps([account_to_dict(a) for a in accounts], indent=2, ensure_ascii=False))
    else:
        for account in accounts:
            account.display_details()

    return 0


if __name__ == "__main__":
    sys.exit(main())
