"""
Least-privilege IAM roles for lambda functions, one per function.
"""
from .diagnostics import Diagnostics
from .errors import CustomRolesError, UnsupportedHostVersion
from .naming import Naming
from .plugin import CustomRoles
from .rolegen import RoleSynthesizer, generate_role, logging_policy
from .service import ResourceSink, Service
from .streams import get_streams_policy

__all__ = (
    'CustomRoles', 'RoleSynthesizer', 'Service', 'ResourceSink', 'Naming',
    'Diagnostics', 'CustomRolesError', 'UnsupportedHostVersion',
    'generate_role', 'logging_policy', 'get_streams_policy',
)
