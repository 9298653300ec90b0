# This project was developed with assistance from AI tools.
"""CLI entrypoint for rate catalog seeding.

Usage:
    python -m mortgage_api.seed          # Seed default rates
    python -m mortgage_api.seed --force  # Replace existing rates
"""

import argparse
import asyncio
import json
import sys

from db.database import SessionLocal

from .services.seed import seed_rates


async def main(force: bool = False) -> None:
    """Run rate seeding."""
    async with SessionLocal() as session:
        result = await seed_rates(session, force=force)
        print(json.dumps(result, indent=2, default=str))

        if result.get("status") == "already_seeded":
            print("\nRates already seeded. Use --force to re-seed.")
            sys.exit(0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the mortgage rate catalog")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clear existing rates and re-seed",
    )
    args = parser.parse_args()
    asyncio.run(main(force=args.force))
