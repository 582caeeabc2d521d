"""orgperm: permission evaluation for multi-tenant business applications.

Predefined and custom roles, permission hierarchy inference, grant
delegation and role-assignment rules, served over a small FastAPI app.
"""

__version__ = "1.0.0"
