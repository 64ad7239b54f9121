from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from roles_app.app.utils.default_roles import SystemRoles

# Permission definitions are schema-less flag bags owned by the host application
PermissionDefinition = Dict[str, Any]


class Role(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: Optional[Any] = Field(default=None, alias="_id")
    name: SystemRoles
    permissions: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("permissions", mode="before")
    @classmethod
    def _null_permissions_as_empty(cls, value):
        return value if value is not None else {}

    def to_document(self) -> dict:
        return {"name": self.name, "permissions": self.permissions}


class RoleSummary(BaseModel):
    name: str
    permission_count: int


class InitializationResult(BaseModel):
    success: bool
    summary: List[RoleSummary] = []
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: Exception) -> "InitializationResult":
        return cls(success=False, error=f"{type(error).__name__}: {error}")
