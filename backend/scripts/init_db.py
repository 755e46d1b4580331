#!/usr/bin/env python3
"""
Initialize database: create the query_history table.
Tables are also created on API startup; run this when provisioning a
database ahead of time.

Usage:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core.database.session import build_engine, init_db


async def main():
    """Create all database tables"""
    settings = config.load_settings()
    config.setup_logging(settings)

    print("=" * 60)
    print("Database Initialization")
    print("=" * 60)

    config.ensure_sqlite_dir(settings.database_url)
    engine = build_engine(settings.database_url)
    try:
        await init_db(engine)
        print("\nDatabase tables created successfully!")
        print("\nTables created:")
        print("  - query_history")
        return 0
    except Exception as e:
        print(f"\nError: {e}")
        return 1
    finally:
        await engine.dispose()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
