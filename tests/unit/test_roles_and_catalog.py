"""Tests for the predefined role tables and the custom-role permission catalog."""

from orgperm.core import constants as perms
from orgperm.domain.catalog import (
    PERMISSION_MODULES,
    describe_permission,
    format_permission_name,
    get_all_available_permissions,
    get_available_permission_names,
    get_permission_color,
    get_permission_metadata,
)
from orgperm.domain.enums import RoleCategory, UserRole
from orgperm.domain.roles import (
    ROLE_ASSIGNMENT_RANK,
    ROLE_HIERARCHY,
    ROLE_INFO,
    ROLE_PERMISSIONS,
    coerce_role,
    get_all_required_permission_names,
    get_role_assignment_rank,
    get_role_display_name,
    get_user_role_level,
)


class TestRoleTables:
    def test_every_role_is_in_every_table(self) -> None:
        for table in (ROLE_PERMISSIONS, ROLE_INFO, ROLE_HIERARCHY, ROLE_ASSIGNMENT_RANK):
            assert set(table) == set(UserRole)

    def test_role_permissions_are_canonical(self) -> None:
        canonical = set(perms.ALL_PERMISSIONS)
        for permissions in ROLE_PERMISSIONS.values():
            assert set(permissions) <= canonical

    def test_hierarchy_levels(self) -> None:
        assert get_user_role_level(UserRole.ORGANIZATION_OWNER) == 6
        assert get_user_role_level(UserRole.SUPER_ADMIN) == 5
        assert get_user_role_level(UserRole.DEPARTMENT_MANAGER) == 4
        assert get_user_role_level(UserRole.FINANCE_MANAGER) == 3
        assert get_user_role_level("EMPLOYEE") == 2
        assert get_user_role_level(UserRole.VIEWER) == 1
        assert get_user_role_level("bogus") == 1
        assert get_user_role_level(None) == 1

    def test_assignment_ranks(self) -> None:
        assert get_role_assignment_rank(UserRole.ORGANIZATION_OWNER) == 5
        assert get_role_assignment_rank(UserRole.DEPARTMENT_MANAGER) == 3
        assert get_role_assignment_rank(UserRole.SALES_MANAGER) == 2
        assert get_role_assignment_rank(UserRole.CONTRACTOR) == 1

    def test_only_owner_holds_billing(self) -> None:
        for role, permissions in ROLE_PERMISSIONS.items():
            holds_billing = perms.ORG_BILLING in permissions
            assert holds_billing is (role is UserRole.ORGANIZATION_OWNER)

    def test_role_info(self) -> None:
        info = ROLE_INFO[UserRole.SALES_MANAGER]
        assert info.name == "Sales Manager"
        assert info.category is RoleCategory.DEPARTMENTAL
        assert get_role_display_name("VIEWER") == "Viewer"
        assert get_role_display_name("bogus") == "bogus"

    def test_coerce_role(self) -> None:
        assert coerce_role("HR_MANAGER") is UserRole.HR_MANAGER
        assert coerce_role(UserRole.VIEWER) is UserRole.VIEWER
        assert coerce_role("hr_manager") is None
        assert coerce_role(None) is None

    def test_required_permission_names(self) -> None:
        names = get_all_required_permission_names()
        assert len(names) == 26
        assert len(set(names)) == len(names)


class TestCatalog:
    def test_modules_in_order(self) -> None:
        assert [g.module for g in PERMISSION_MODULES] == [
            "crm",
            "finance",
            "hr",
            "projects",
            "collaboration",
            "marketing",
            "settings",
            "organization",
        ]

    def test_billing_module_not_offered(self) -> None:
        names = get_available_permission_names()
        assert "billing:read" not in names
        assert "organization:billing" in names
        assert len(get_all_available_permissions()) == 23

    def test_entries_carry_module_and_action(self) -> None:
        first = get_all_available_permissions()[0]
        assert (first.name, first.module, first.action) == ("crm:read", "crm", "read")

    def test_describe_permission(self) -> None:
        assert describe_permission("crm", "read") == "View crm data and information"
        assert describe_permission("hr", "write") == "Create and manage hr data"
        assert describe_permission("finance", "admin") == "Full finance administration"
        assert describe_permission("organization", "members") == "Members organization"
        assert describe_permission("widgets", "export") == "export widgets"
        assert describe_permission("organization", "billing") == "Billing organization"
        assert describe_permission("crm", "manage") == "Create and manage crm data"

    def test_get_permission_metadata(self) -> None:
        meta = get_permission_metadata("billing:manage")
        assert meta.module == "billing"
        assert meta.action == "manage"
        assert meta.description == "Create and manage billing data"

    def test_format_permission_name(self) -> None:
        assert format_permission_name("crm:read") == "Crm: Read"
        assert format_permission_name("organization:members") == "Organization: Members"
        assert format_permission_name("crm:bulkExport") == "Crm: Bulk Export"

    def test_get_permission_color(self) -> None:
        assert get_permission_color("crm:read") == "bg-blue-100 text-blue-800"
        assert get_permission_color("crm:admin") == "bg-red-100 text-red-800"
        assert get_permission_color("organization:billing") == "bg-yellow-100 text-yellow-800"
        assert get_permission_color("superuser") == "bg-gray-100 text-gray-800"
