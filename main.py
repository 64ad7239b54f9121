import asyncio
import sys

from roles_app.app.database.connection import MongoConnection
from roles_app.app.repository.role import MongoRoleStore
from roles_app.app.schema.RoleSchema import InitializationResult
from roles_app.app.services.role_initializer import RoleInitializer
from roles_app.app.utils.default_roles import ROLE_DEFAULTS, ROLE_ORDER
from roles_app.app.utils.log import log
from roles_app.settings import Settings, settings as default_settings


async def fix_roles(settings: Settings = default_settings) -> InitializationResult:
    connection = MongoConnection(settings.MONGO_URI, settings.DB_NAME, settings.MONGO_TIMEOUT_MS)
    try:
        await connection.connect()
        store = MongoRoleStore(connection.roles)
        await store.ensure_indexes()
        return await RoleInitializer(store).run_initialization(ROLE_ORDER, ROLE_DEFAULTS)
    except Exception as e:
        log.exception(f"❌ Error while initializing roles: {e}")
        return InitializationResult.failed(e)
    finally:
        await connection.disconnect()


def main() -> int:
    result = asyncio.run(fix_roles())
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
