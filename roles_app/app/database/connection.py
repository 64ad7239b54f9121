from typing import Optional
from urllib.parse import urlparse

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from roles_app.app.exceptions.role_exceptions import RoleStoreConnectionError
from roles_app.app.utils.log import log

DEFAULT_DB_NAME = "LibreChat"


def resolve_db_name(uri: str, db_name: Optional[str] = None) -> str:
    """Explicit name first, then the path of the connection string, then the default."""
    if db_name:
        return db_name
    path = urlparse(uri).path.lstrip("/")
    return path or DEFAULT_DB_NAME


class MongoConnection:
    def __init__(self, uri: str, db_name: Optional[str] = None, timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = resolve_db_name(uri, db_name)
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> AsyncIOMotorDatabase:
        log.info("🔌 Connecting to MongoDB...")
        client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise RoleStoreConnectionError(f"Could not connect to MongoDB: {e}") from e

        self.client = client
        self.db = client[self.db_name]
        log.info(f"✅ Connected to MongoDB database '{self.db_name}'")
        return self.db

    @property
    def roles(self) -> AsyncIOMotorCollection:
        if self.db is None:
            raise RoleStoreConnectionError("MongoDB connection is not open")
        return self.db.get_collection("roles")

    async def disconnect(self):
        if self.client is None:
            return
        self.client.close()
        self.client = None
        self.db = None
        log.info("🔌 Disconnected from MongoDB")

    async def __aenter__(self) -> "MongoConnection":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.disconnect()
