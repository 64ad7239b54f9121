from abc import ABC, abstractmethod
from typing import List, Optional

from roles_app.app.schema.RoleSchema import Role


class BaseRoleStore(ABC):
    @abstractmethod
    async def find_one(self, name: str) -> Optional[Role]:
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def save(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def find_all(self) -> List[dict]:
        """Return every stored role projected to ``name`` and ``permissions``."""
        pass
