from __future__ import annotations

import contextvars

operation_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "operation", default="-"
)
