# app_versioning/core/context.py

import contextvars

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
organization_id_ctx = contextvars.ContextVar("organization_id", default=None)
