"""
Service layer.

The student service owns all record state.  HTTP handlers receive it
through a FastAPI dependency and never touch the underlying mapping
directly.
"""
