import copy
from typing import Any, Dict, Iterable, List, Mapping, Optional

from roles_app.app.exceptions.role_exceptions import MissingRoleDefaultsError
from roles_app.app.repository.base import BaseRoleStore
from roles_app.app.schema.RoleSchema import InitializationResult, PermissionDefinition, Role, RoleSummary
from roles_app.app.utils.log import log


def _has_definition(value: Any) -> bool:
    return isinstance(value, Mapping) and len(value) > 0


def merge_missing_permissions(
    current: Optional[Mapping[str, Any]],
    defaults: Mapping[str, PermissionDefinition],
) -> Dict[str, Any]:
    """
    Fill in every default category that is absent, null, empty or not a mapping in ``current``.

    Non-empty categories are never overwritten and categories unknown to
    ``defaults`` are kept as they are.
    """
    merged = dict(current or {})
    for category, definition in defaults.items():
        if not _has_definition(merged.get(category)):
            merged[category] = copy.deepcopy(definition)
    return merged


class RoleInitializer:
    def __init__(self, store: BaseRoleStore):
        self.store = store

    async def ensure_role(self, role_name: str, defaults: Mapping[str, dict]) -> Role:
        role_defaults = defaults.get(role_name)
        if role_defaults is None:
            raise MissingRoleDefaultsError(role_name)

        role = await self.store.find_one(role_name)
        if role is None:
            log.info(f"  ➕ Creating {role_name} role...")
            role = Role.model_validate(copy.deepcopy(role_defaults))
            role = await self.store.create(role)
        else:
            log.info(f"  🔄 Updating {role_name} role...")
            role.permissions = merge_missing_permissions(
                role.permissions, role_defaults.get("permissions") or {}
            )
            role = await self.store.save(role)

        log.info(f"  ✅ {role_name} role ready")
        return role

    async def summarize(self) -> List[RoleSummary]:
        roles = await self.store.find_all()
        return [
            RoleSummary(name=str(role.get("name")), permission_count=len(role.get("permissions") or {}))
            for role in roles
        ]

    async def run_initialization(
        self, role_names: Iterable[str], defaults: Mapping[str, dict]
    ) -> InitializationResult:
        try:
            log.info("📝 Initializing role documents...")
            for role_name in role_names:
                await self.ensure_role(role_name, defaults)

            log.info("✅ All roles initialized successfully!")
            summary = await self.summarize()
        except Exception as e:
            log.exception(f"❌ Error while initializing roles: {e}")
            return InitializationResult.failed(e)

        log.info("📊 Role overview:")
        for item in summary:
            log.info(f"  - {item.name}: {item.permission_count} permission types")
        return InitializationResult(success=True, summary=summary)
