"""HTTP middleware: request ID.

Applied in main app. Import and use from orgperm.main.
"""

from orgperm.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
