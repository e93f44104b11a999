#!/usr/bin/env python3
"""
Database Reset Script
Drop and recreate every table of the platform

Notes:
- Tables come from the SQLAlchemy models registered on Base (importing the
  DI container imports every repository and therefore every model)
- This script only resets structure, it does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.config.di import container  # noqa: F401  registers models
from movie_booking.platform.database.orm_db_setting import (
    Base,
    create_db_and_tables,
    dispose_engine,
    drop_db_tables,
)


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    try:
        print('🗑️ Dropping tables...')
        await drop_db_tables()

        print('🏗️ Creating tables...')
        await create_db_and_tables()
        for table in Base.metadata.sorted_tables:
            print(f'   ✅ {table.name}')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1) from e

    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
