"""Permission catalog for the custom-role editor.

Groups the grantable permissions by module with human-readable labels,
and derives descriptions and display helpers for any permission name.
Billing-module permissions are not offered here.
"""

import re
from dataclasses import dataclass

from orgperm.core import constants as perms
from orgperm.domain.enums import PermissionAction
from orgperm.domain.value_objects.core import parse_permission


@dataclass(frozen=True)
class CatalogPermission:
    """One selectable permission in the catalog."""

    name: str
    description: str
    module: str
    action: str


@dataclass(frozen=True)
class PermissionGroup:
    """A module and the permissions offered for it."""

    module: str
    label: str
    description: str
    permissions: tuple[CatalogPermission, ...]


def _entry(name: str, description: str) -> CatalogPermission:
    module, action = parse_permission(name)
    return CatalogPermission(
        name=name, description=description, module=module, action=action
    )


PERMISSION_MODULES: tuple[PermissionGroup, ...] = (
    PermissionGroup(
        module="crm",
        label="Customer Relationship Management",
        description="Manage customer data, interactions, and sales pipeline",
        permissions=(
            _entry(perms.CRM_READ, "View customer data"),
            _entry(perms.CRM_WRITE, "Create and edit customers"),
            _entry(perms.CRM_ADMIN, "Full CRM administration"),
        ),
    ),
    PermissionGroup(
        module="finance",
        label="Financial Management",
        description="Handle invoicing, payments, and financial reports",
        permissions=(
            _entry(perms.FINANCE_READ, "View financial data"),
            _entry(perms.FINANCE_WRITE, "Create invoices and payments"),
            _entry(perms.FINANCE_ADMIN, "Full financial administration"),
        ),
    ),
    PermissionGroup(
        module="hr",
        label="Human Resources",
        description="Manage employees, payroll, and performance",
        permissions=(
            _entry(perms.HR_READ, "View employee data"),
            _entry(perms.HR_WRITE, "Manage employee records"),
            _entry(perms.HR_ADMIN, "Full HR administration"),
        ),
    ),
    PermissionGroup(
        module="projects",
        label="Project Management",
        description="Manage projects, tasks, and time tracking",
        permissions=(
            _entry(perms.PROJECTS_READ, "View projects and tasks"),
            _entry(perms.PROJECTS_WRITE, "Create and manage projects"),
            _entry(perms.PROJECTS_ADMIN, "Full project administration"),
        ),
    ),
    PermissionGroup(
        module="collaboration",
        label="Team Collaboration",
        description="Communication, calendar, and file sharing",
        permissions=(
            _entry(perms.COLLABORATION_READ, "View team content"),
            _entry(perms.COLLABORATION_WRITE, "Create and share content"),
        ),
    ),
    PermissionGroup(
        module="marketing",
        label="Marketing Automation",
        description="Campaigns, email marketing, and analytics",
        permissions=(
            _entry(perms.MARKETING_READ, "View marketing data"),
            _entry(perms.MARKETING_WRITE, "Create campaigns"),
            _entry(perms.MARKETING_ADMIN, "Full marketing administration"),
        ),
    ),
    PermissionGroup(
        module="settings",
        label="System Settings",
        description="Organization settings and configuration",
        permissions=(
            _entry(perms.SETTINGS_READ, "View system settings"),
            _entry(perms.SETTINGS_WRITE, "Modify settings"),
            _entry(perms.SETTINGS_ADMIN, "Full settings administration"),
        ),
    ),
    PermissionGroup(
        module="organization",
        label="Organization Management",
        description="Billing, members, and organization-wide settings",
        permissions=(
            _entry(perms.ORG_ADMIN, "Organization administration"),
            _entry(perms.ORG_BILLING, "Billing management"),
            _entry(perms.ORG_MEMBERS, "Member management"),
        ),
    ),
)

_MODULE_NAMES: dict[str, str] = {
    "crm": "CRM",
    "finance": "Finance",
    "hr": "HR",
    "projects": "Projects",
    "collaboration": "Collaboration",
    "marketing": "Marketing",
    "settings": "Settings",
    "organization": "Organization",
    "billing": "Billing",
    "ai": "AI",
}

_ACTION_NAMES: dict[PermissionAction, str] = {
    PermissionAction.READ: "View",
    PermissionAction.WRITE: "Manage",
    PermissionAction.ADMIN: "Administer",
    PermissionAction.MANAGE: "Manage",
    PermissionAction.BILLING: "Billing",
    PermissionAction.MEMBERS: "Members",
}

# Checked in order; first substring match wins.
_PERMISSION_COLORS: tuple[tuple[str, str], ...] = (
    (":read", "bg-blue-100 text-blue-800"),
    (":write", "bg-green-100 text-green-800"),
    (":admin", "bg-red-100 text-red-800"),
    (":delete", "bg-red-100 text-red-800"),
    (":billing", "bg-yellow-100 text-yellow-800"),
    (":members", "bg-purple-100 text-purple-800"),
)
_DEFAULT_COLOR = "bg-gray-100 text-gray-800"

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def get_all_available_permissions() -> list[CatalogPermission]:
    """Return every catalog permission, flattened in module order."""
    return [p for group in PERMISSION_MODULES for p in group.permissions]


def get_available_permission_names() -> frozenset[str]:
    return frozenset(p.name for p in get_all_available_permissions())


def describe_permission(module: str, action: str) -> str:
    """Build a readable description for module and action.

    Unknown actions are echoed as-is ("export widgets").
    """
    module_name = _MODULE_NAMES.get(module, module).lower()
    try:
        known = PermissionAction(action)
    except ValueError:
        return f"{action} {module_name}"
    if known is PermissionAction.READ:
        return f"View {module_name} data and information"
    if known in (PermissionAction.WRITE, PermissionAction.MANAGE):
        return f"Create and manage {module_name} data"
    if known is PermissionAction.ADMIN:
        return f"Full {module_name} administration"
    return f"{_ACTION_NAMES[known]} {module_name}"


def get_permission_metadata(name: str) -> CatalogPermission:
    """Return storage metadata (name, description, module, action) for name."""
    module, action = parse_permission(name)
    return CatalogPermission(
        name=name,
        description=describe_permission(module, action),
        module=module,
        action=action,
    )


def format_permission_name(name: str) -> str:
    """Return a title-cased display label ("crm:read" -> "Crm: Read")."""
    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", name.replace(":", ": "))
    return " ".join(word[:1].upper() + word[1:] for word in spaced.split(" "))


def get_permission_color(name: str) -> str:
    for marker, color in _PERMISSION_COLORS:
        if marker in name:
            return color
    return _DEFAULT_COLOR
