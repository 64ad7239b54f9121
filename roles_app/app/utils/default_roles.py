from enum import Enum


class SystemRoles(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


# Order matters: ADMIN is initialized before USER
ROLE_ORDER = [SystemRoles.ADMIN.value, SystemRoles.USER.value]

ROLE_DEFAULTS = {
    SystemRoles.ADMIN.value: {
        "name": SystemRoles.ADMIN.value,
        "permissions": {
            "PROMPTS": {"SHARED_GLOBAL": True, "USE": True, "CREATE": True},
            "BOOKMARKS": {"USE": True},
            "AGENTS": {"SHARED_GLOBAL": True, "USE": True, "CREATE": True},
            "MEMORIES": {"USE": True, "CREATE": True, "UPDATE": True, "READ": True, "OPT_OUT": True},
            "MULTI_CONVO": {"USE": True},
            "TEMPORARY_CHAT": {"USE": True},
            "RUN_CODE": {"USE": True},
            "WEB_SEARCH": {"USE": True},
            "PEOPLE_PICKER": {"VIEW_USERS": True, "VIEW_GROUPS": True, "VIEW_ROLES": True},
            "MARKETPLACE": {"USE": True},
            "FILE_SEARCH": {"USE": True},
            "FILE_CITATIONS": {"USE": True},
        },
    },
    SystemRoles.USER.value: {
        "name": SystemRoles.USER.value,
        "permissions": {
            "PROMPTS": {"SHARED_GLOBAL": False, "USE": True, "CREATE": True},
            "BOOKMARKS": {"USE": True},
            "AGENTS": {"SHARED_GLOBAL": False, "USE": True, "CREATE": True},
            "MEMORIES": {"USE": True, "CREATE": True, "UPDATE": True, "READ": True, "OPT_OUT": True},
            "MULTI_CONVO": {"USE": True},
            "TEMPORARY_CHAT": {"USE": True},
            "RUN_CODE": {"USE": True},
            "WEB_SEARCH": {"USE": True},
            "PEOPLE_PICKER": {"VIEW_USERS": False, "VIEW_GROUPS": False, "VIEW_ROLES": False},
            "MARKETPLACE": {"USE": False},
            "FILE_SEARCH": {"USE": True},
            "FILE_CITATIONS": {"USE": True},
        },
    },
}
