# user_management/adapters/outbound/persistence/seeds/__main__.py

"""
Run every seed from the command line:
`python -m user_management.adapters.outbound.persistence.seeds`
"""

import asyncio
import logging

from user_management.adapters.configuration.config import settings
from user_management.adapters.outbound.persistence.database import create_tables, get_db_context
from user_management.adapters.outbound.persistence.seeds import run_all_seeds


async def main() -> None:
    await create_tables()
    async with get_db_context() as session:
        await run_all_seeds(session, include_sample_users=settings.SEED_SAMPLE_USERS)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
