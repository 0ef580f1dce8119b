# src/rbac/permissions.py
from src.models.enums import Module, Role

# Actions each module defines, in display order
MODULE_ACTIONS: dict[Module, tuple[str, ...]] = {
    Module.EMPLOYEES: (
        "create",
        "read",
        "update",
        "delete",
        "register",  # register with login credentials
        "deactivate",
        "password",  # set or reset an employee password
    ),
    Module.USERS: (
        "create",
        "read",
        "update",
        "delete",
        "manageRoles",
        "resetPasswords",
        "deactivate",
    ),
    Module.ATTENDANCE: ("create", "read", "update", "delete", "viewReports"),
    Module.LEAVES: ("create", "read", "update", "delete", "approve", "viewAll"),
    Module.PAYROLL: ("create", "read", "update", "delete", "process"),
    Module.REPORTS: ("view", "generate", "export"),
    Module.SYSTEM: ("settings", "database", "logs", "backup"),
}

PERMISSION_MATRIX: dict[Role, dict[Module, dict[str, bool]]] = {
    Role.ADMIN: {
        Module.EMPLOYEES: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "register": True,
            "deactivate": True,
            "password": True,
        },
        Module.USERS: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "manageRoles": True,
            "resetPasswords": True,
            "deactivate": True,
        },
        Module.ATTENDANCE: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "viewReports": True,
        },
        Module.LEAVES: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "approve": True,
            "viewAll": True,
        },
        Module.PAYROLL: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "process": True,
        },
        Module.REPORTS: {"view": True, "generate": True, "export": True},
        Module.SYSTEM: {
            "settings": True,
            "database": True,
            "logs": True,
            "backup": True,
        },
    },
    Role.HR: {
        Module.EMPLOYEES: {
            "create": True,
            "read": True,
            "update": True,
            "delete": True,
            "register": False,
            "deactivate": False,
            "password": False,
        },
        Module.USERS: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "manageRoles": False,
            "resetPasswords": False,
            "deactivate": False,
        },
        Module.ATTENDANCE: {
            "create": True,
            "read": True,
            "update": True,
            "delete": False,
            "viewReports": True,
        },
        Module.LEAVES: {
            "create": True,
            "read": True,
            "update": True,
            "delete": False,
            "approve": True,
            "viewAll": True,
        },
        Module.PAYROLL: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "process": False,
        },
        Module.REPORTS: {"view": True, "generate": True, "export": True},
        Module.SYSTEM: {
            "settings": False,
            "database": False,
            "logs": False,
            "backup": False,
        },
    },
    Role.MANAGER: {
        Module.EMPLOYEES: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "register": False,
            "deactivate": False,
            "password": False,
        },
        Module.USERS: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "manageRoles": False,
            "resetPasswords": False,
            "deactivate": False,
        },
        Module.ATTENDANCE: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "viewReports": True,
        },
        Module.LEAVES: {
            "create": False,
            "read": True,
            "update": False,
            "delete": False,
            "approve": True,
            "viewAll": False,  # own department only
        },
        Module.PAYROLL: {
            "create": False,
            "read": False,
            "update": False,
            "delete": False,
            "process": False,
        },
        Module.REPORTS: {"view": True, "generate": False, "export": False},
        Module.SYSTEM: {
            "settings": False,
            "database": False,
            "logs": False,
            "backup": False,
        },
    },
    Role.EMPLOYEE: {
        # Own-record access is handled by resource checks, not the matrix
        Module.EMPLOYEES: {
            "create": False,
            "read": False,
            "update": False,
            "delete": False,
            "register": False,
            "deactivate": False,
            "password": False,
        },
        Module.USERS: {
            "create": False,
            "read": False,
            "update": False,
            "delete": False,
            "manageRoles": False,
            "resetPasswords": False,
            "deactivate": False,
        },
        Module.ATTENDANCE: {
            "create": False,
            "read": False,
            "update": False,
            "delete": False,
            "viewReports": False,
        },
        Module.LEAVES: {
            "create": True,  # request leave
            "read": False,
            "update": False,
            "delete": False,
            "approve": False,
            "viewAll": False,
        },
        Module.PAYROLL: {
            "create": False,
            "read": False,
            "update": False,
            "delete": False,
            "process": False,
        },
        Module.REPORTS: {"view": False, "generate": False, "export": False},
        Module.SYSTEM: {
            "settings": False,
            "database": False,
            "logs": False,
            "backup": False,
        },
    },
}
