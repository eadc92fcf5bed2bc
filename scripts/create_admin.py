#!/usr/bin/env python3
"""Create the default super admin account if it does not exist"""

import asyncio
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backend.app.core.config import get_settings
from backend.app.core.database import Database
from backend.app.core.logging import get_logger, setup_logging
from backend.app.models.admin import AdminRole, Permission
from backend.app.repositories.principal_repository import AdminRepository

logger = get_logger(__name__)


async def create_default_admin() -> bool:
    """
    Seed a super admin from ADMIN_EMAIL / ADMIN_PASSWORD

    Returns:
        True if an account was created, False if one already existed
    """
    settings = get_settings()
    database = Database(settings)

    try:
        if settings.DATABASE_CREATE_ALL:
            await database.create_all()

        async with database.session_factory() as session:
            repo = AdminRepository(session)
            existing = await repo.get_by_email(settings.ADMIN_EMAIL)
            if existing is not None:
                logger.info(f"Admin {existing.email} already exists, nothing to do")
                return False

            admin = await repo.create_principal({
                "first_name": "Super",
                "last_name": "Admin",
                "email": settings.ADMIN_EMAIL,
                "password": settings.ADMIN_PASSWORD,
                "role": AdminRole.SUPER_ADMIN,
                "permissions": [p.value for p in Permission],
            })
            await session.commit()

        logger.info(f"Created super admin {admin.email}")
        logger.warning("Change the default admin password after the first login")
        return True
    finally:
        await database.dispose()


def main():
    setup_logging(get_settings())

    try:
        asyncio.run(create_default_admin())
    except Exception as e:
        logger.error(f"Failed to create admin: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
