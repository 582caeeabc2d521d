"""Core constants: canonical permission names.

Single source of truth for every permission the application knows about.
Role tables, the custom-role catalog and the permission sync analyzer all
read from here.
"""

# CRM
CRM_READ = "crm:read"
CRM_WRITE = "crm:write"
CRM_ADMIN = "crm:admin"

# Finance
FINANCE_READ = "finance:read"
FINANCE_WRITE = "finance:write"
FINANCE_ADMIN = "finance:admin"

# HR
HR_READ = "hr:read"
HR_WRITE = "hr:write"
HR_ADMIN = "hr:admin"

# Projects
PROJECTS_READ = "projects:read"
PROJECTS_WRITE = "projects:write"
PROJECTS_ADMIN = "projects:admin"

# Collaboration (no admin level)
COLLABORATION_READ = "collaboration:read"
COLLABORATION_WRITE = "collaboration:write"

# Marketing
MARKETING_READ = "marketing:read"
MARKETING_WRITE = "marketing:write"
MARKETING_ADMIN = "marketing:admin"

# Settings
SETTINGS_READ = "settings:read"
SETTINGS_WRITE = "settings:write"
SETTINGS_ADMIN = "settings:admin"

# Organization
ORG_ADMIN = "organization:admin"
ORG_BILLING = "organization:billing"
ORG_MEMBERS = "organization:members"

# Billing (owner-only)
BILLING_READ = "billing:read"
BILLING_MANAGE = "billing:manage"
BILLING_ADMIN = "billing:admin"

BILLING_MODULE = "billing"

ALL_PERMISSIONS: tuple[str, ...] = (
    CRM_READ,
    CRM_WRITE,
    CRM_ADMIN,
    FINANCE_READ,
    FINANCE_WRITE,
    FINANCE_ADMIN,
    HR_READ,
    HR_WRITE,
    HR_ADMIN,
    PROJECTS_READ,
    PROJECTS_WRITE,
    PROJECTS_ADMIN,
    COLLABORATION_READ,
    COLLABORATION_WRITE,
    MARKETING_READ,
    MARKETING_WRITE,
    MARKETING_ADMIN,
    SETTINGS_READ,
    SETTINGS_WRITE,
    SETTINGS_ADMIN,
    ORG_ADMIN,
    ORG_BILLING,
    ORG_MEMBERS,
    BILLING_READ,
    BILLING_MANAGE,
    BILLING_ADMIN,
)
