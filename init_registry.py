"""
Initialise the registry database.

Creates the tables and captures the configured administrator identity. Running
it again leaves the stored administrator untouched.
"""
import asyncio

from asset_registry.core.config import get_settings
from asset_registry.core.logging import configure_logging
from asset_registry.infrastructure.database import dispose_engine, get_session, init_db
from asset_registry.modules.registry import RegistryService


async def initialise_registry() -> None:
    settings = get_settings()
    configure_logging(settings)
    await init_db()

    async for db in get_session():
        state = await RegistryService.with_session(db).initialize(settings.admin_identity)
        await db.commit()

        print("=" * 50)
        print(f"Database: {settings.database_url}")
        print(f"Administrator: {state.admin_identity}")
        print(f"Assets registered: {state.total_registered}")
        print("=" * 50)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(initialise_registry())
