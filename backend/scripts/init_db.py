#!/usr/bin/env python3
"""
Database initialization - create all tables
"""

import asyncio
import sys
from pathlib import Path

# Make the accounts package importable when run from a checkout
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from accounts.common.base import Base
from accounts.common.config import settings
from accounts.common.database import db_manager


async def init_database():
    """Create every table for the configured database"""
    print(f"🔧 Initializing database ({settings.database_type})...")

    await db_manager.initialize()
    await db_manager.create_tables()

    print("✅ All tables created successfully!")

    print("\n📋 Tables:")
    for table in sorted(Base.metadata.tables.keys()):
        print(f"  - {table}")

    await db_manager.dispose()


if __name__ == "__main__":
    asyncio.run(init_database())
