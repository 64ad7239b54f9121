from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo import ASCENDING

from roles_app.app.exceptions.role_exceptions import RolePersistError
from roles_app.app.repository.base import BaseRoleStore
from roles_app.app.schema.RoleSchema import Role
from roles_app.app.utils.log import log


class MongoRoleStore(BaseRoleStore):
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index([("name", ASCENDING)], unique=True)

    async def find_one(self, name: str) -> Optional[Role]:
        document = await self.collection.find_one({"name": name})
        if document is None:
            return None
        return Role.model_validate(document)

    async def create(self, role: Role) -> Role:
        document = self._validated_document(role)
        result = await self.collection.insert_one(document)
        role.id = result.inserted_id
        log.debug(f"Inserted role {role.name} with _id={role.id}")
        return role

    async def save(self, role: Role) -> Role:
        if role.id is None:
            return await self.create(role)

        document = self._validated_document(role)
        result = await self.collection.update_one({"_id": role.id}, {"$set": document})
        if result.matched_count == 0:
            raise RolePersistError(f"Role {role.name} (_id={role.id}) no longer exists in the store")
        log.debug(f"Saved role {role.name}, modified={result.modified_count}")
        return role

    async def find_all(self) -> List[dict]:
        cursor = self.collection.find({}, {"_id": 0, "name": 1, "permissions": 1})
        return await cursor.to_list(length=None)

    @staticmethod
    def _validated_document(role: Role) -> dict:
        try:
            return Role.model_validate(role.model_dump(by_alias=True)).to_document()
        except ValidationError as e:
            raise RolePersistError(f"Role {role.name!r} failed validation: {e}") from e
