import copy
import itertools

import pytest

from roles_app.app.exceptions.role_exceptions import RolePersistError
from roles_app.app.repository.base import BaseRoleStore
from roles_app.app.schema.RoleSchema import Role


class InMemoryRoleStore(BaseRoleStore):
    """Dict-backed role store; copies on every read and write like a real database would."""

    def __init__(self, documents=None):
        self._ids = itertools.count(1)
        self.documents = {}
        self.calls = []
        for document in documents or []:
            self.documents[document["name"]] = {"_id": next(self._ids), **copy.deepcopy(document)}

    async def find_one(self, name):
        self.calls.append(("find_one", name))
        document = self.documents.get(name)
        return Role.model_validate(copy.deepcopy(document)) if document else None

    async def create(self, role):
        self.calls.append(("create", role.name))
        if role.name in self.documents:
            raise RolePersistError(f"duplicate key: {role.name}")
        role.id = next(self._ids)
        self.documents[role.name] = {"_id": role.id, **copy.deepcopy(role.to_document())}
        return role

    async def save(self, role):
        self.calls.append(("save", role.name))
        if role.id is None:
            return await self.create(role)
        self.documents[role.name].update(copy.deepcopy(role.to_document()))
        return role

    async def find_all(self):
        self.calls.append(("find_all", None))
        return [
            {"name": doc["name"], "permissions": copy.deepcopy(doc.get("permissions"))}
            for doc in self.documents.values()
        ]


@pytest.fixture
def role_defaults():
    return {
        "ADMIN": {
            "name": "ADMIN",
            "permissions": {
                "read": {"scope": "all"},
                "write": {"enabled": True},
                "share": {"public": True},
            },
        },
        "USER": {
            "name": "USER",
            "permissions": {
                "read": {"scope": "own"},
                "write": {"enabled": True},
            },
        },
    }


@pytest.fixture
def store():
    return InMemoryRoleStore()


@pytest.fixture
def make_store():
    return InMemoryRoleStore
