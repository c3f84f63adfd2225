"""Handler layer for HTTP endpoints.

Handlers render templates against the request's helpers and convert
between DTOs and helper calls.

Architecture:
    Handler -> PluginManager -> helper -> collaborator
"""

from .helper_handler import HelperHandler

__all__ = [
    "HelperHandler",
]
