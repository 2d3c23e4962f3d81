#!/usr/bin/env python3
"""
Seed the vaccine_protocols table with the default dog and cat protocols.

A species is seeded only when it has no protocol rows yet, so running the
script twice is safe.

Usage:
  python scripts/seed_vaccine_protocols.py [--species dog] [--dry-run]
"""

import argparse
import asyncio
import sys
from pathlib import Path
from uuid import uuid4

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.models.vaccine_protocol import VaccineProtocol
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

# (vaccine_name, is_core, min_age_weeks, dose_number, max_age_weeks,
#  interval_weeks, booster_interval_months, description)
DEFAULT_PROTOCOLS: dict[str, list[tuple]] = {
    "dog": [
        ("DHPP", True, 6, 1, 20, 4, None, "Distemper, hepatitis, parvovirus, parainfluenza"),
        ("DHPP", True, 10, 2, 24, 4, None, "Second puppy dose"),
        ("DHPP", True, 14, 3, 28, 4, None, "Third puppy dose"),
        ("Bordetella", False, 8, 1, None, None, 12, "Kennel cough"),
        ("Rabies", True, 12, 1, None, None, 12, "First rabies vaccination"),
        ("Leptospirosis", False, 12, 1, None, 4, 12, "Recommended for outdoor dogs"),
        ("Lyme Disease", False, 12, 1, None, 4, 12, "Tick-endemic areas"),
        ("DHPP Booster", True, 52, 4, None, None, 36, "Adult booster"),
        ("Rabies Booster", True, 52, 2, None, None, 36, "Adult booster"),
    ],
    "cat": [
        ("FVRCP", True, 6, 1, 20, 4, None, "Rhinotracheitis, calicivirus, panleukopenia"),
        ("FVRCP", True, 10, 2, 24, 4, None, "Second kitten dose"),
        ("FVRCP", True, 14, 3, 28, 4, None, "Third kitten dose"),
        ("FeLV", False, 8, 1, None, 4, None, "Feline leukemia, first dose"),
        ("FeLV", False, 12, 2, None, None, 12, "Feline leukemia, second dose"),
        ("Rabies", True, 12, 1, None, None, 12, "First rabies vaccination"),
        ("FVRCP Booster", True, 52, 4, None, None, 36, "Adult booster"),
        ("Rabies Booster", True, 52, 2, None, None, 12, "Adult booster"),
    ],
}


def build_protocols(species: str) -> list[VaccineProtocol]:
    return [
        VaccineProtocol(
            id=uuid4(),
            species=species,
            vaccine_name=name,
            is_core=is_core,
            min_age_weeks=min_age,
            dose_number=dose,
            max_age_weeks=max_age,
            interval_weeks=interval,
            booster_interval_months=booster,
            description=description,
        )
        for name, is_core, min_age, dose, max_age, interval, booster, description in DEFAULT_PROTOCOLS[
            species
        ]
    ]


async def seed(species_list: list[str], dry_run: bool = False) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            for species in species_list:
                existing = await uow.vaccine_protocols.list_for_species(species)
                if existing:
                    print(f"ℹ️  {species}: {len(existing)} protocols already present, skipping")
                    continue
                protocols = build_protocols(species)
                if dry_run:
                    for p in protocols:
                        print(f"   {species}: {p.vaccine_name} (dose {p.dose_number}, {p.min_age_weeks}w)")
                    continue
                await uow.vaccine_protocols.add_many(protocols)
                print(f"✅ {species}: seeded {len(protocols)} protocols")
            if not dry_run:
                await uow.commit()
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed default vaccine protocols")
    parser.add_argument(
        "--species",
        choices=sorted(DEFAULT_PROTOCOLS),
        action="append",
        help="Species to seed (repeatable, default: all)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print protocols without writing")
    args = parser.parse_args()

    asyncio.run(seed(args.species or sorted(DEFAULT_PROTOCOLS), dry_run=args.dry_run))


if __name__ == "__main__":
    main()
