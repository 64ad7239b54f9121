class RoleInitializationError(Exception):
    """Base class for failures while initializing role documents."""


class RoleStoreConnectionError(RoleInitializationError):
    """Raised when the role store cannot be reached."""


class RolePersistError(RoleInitializationError):
    """Raised when a role create/save is rejected."""


class MissingRoleDefaultsError(RoleInitializationError):
    """Raised when a role identifier has no entry in the defaults table."""

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"No default permissions configured for role '{role_name}'")
