# src/rbac/routes.py
from src.models.enums import Role

LOGIN_ROUTE = "/login"

_ADMIN_ONLY = frozenset({Role.ADMIN})
_HR = frozenset({Role.HR, Role.ADMIN})
_MANAGER = frozenset({Role.MANAGER, Role.ADMIN})
_EVERYONE = frozenset({Role.EMPLOYEE, Role.MANAGER, Role.HR, Role.ADMIN})

# Path prefix -> roles allowed to open it. Resolved by longest matching prefix.
ROUTE_ACCESS: dict[str, frozenset[Role]] = {
    "/admin": _ADMIN_ONLY,
    "/admin/employees": _ADMIN_ONLY,
    "/admin/employees/add": _ADMIN_ONLY,
    "/admin/employees/register": _ADMIN_ONLY,
    "/admin/attendance": _ADMIN_ONLY,
    "/admin/leaves": _ADMIN_ONLY,
    "/admin/schedules": _ADMIN_ONLY,
    "/admin/payroll": _ADMIN_ONLY,
    "/admin/reports": _ADMIN_ONLY,
    "/admin/notifications": _ADMIN_ONLY,
    "/admin/users": _ADMIN_ONLY,
    "/admin/system": _ADMIN_ONLY,
    "/hr": _HR,
    "/hr/employees": _HR,
    "/hr/employees/add": _HR,
    "/hr/attendance": _HR,
    "/hr/leave": _HR,
    "/hr/payroll": _HR,
    "/hr/reports": _HR,
    "/hr/notifications": _HR,
    "/hr/settings": _HR,
    "/manager": _MANAGER,
    "/manager/attendance": _MANAGER,
    "/manager/leaves": _MANAGER,
    "/manager/reports": _MANAGER,
    "/employee": _EVERYONE,
    "/employee/attendance": _EVERYONE,
    "/employee/leaves": _EVERYONE,
    "/employee/profile": _EVERYONE,
}


def normalize_path(path: object) -> str | None:
    """Normalize a request path to '/a/b/c' form.

    Returns None for anything that is not a non-empty string path.
    """
    if not isinstance(path, str):
        return None
    path = path.strip().split("?", 1)[0].split("#", 1)[0]
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return None
    return "/" + "/".join(segments)


DEFAULT_ROUTES: dict[Role, str] = {
    Role.ADMIN: "/admin",
    Role.HR: "/hr",
    Role.MANAGER: "/manager",
    Role.EMPLOYEE: "/employee",
}

ROLE_DISPLAY_NAMES: dict[Role, str] = {
    Role.ADMIN: "Administrator",
    Role.HR: "HR Manager",
    Role.MANAGER: "Department Manager",
    Role.EMPLOYEE: "Employee",
}
