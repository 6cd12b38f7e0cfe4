"""
Hooks role generation into the host's deployment lifecycle.
"""
import semver

from .diagnostics import TAG, Diagnostics
from .errors import UnsupportedHostVersion
from .rolegen import RoleSynthesizer
from .service import ResourceSink

__all__ = 'CustomRoles', 'check_version'

MIN_HOST_VERSION = semver.Version(1, 12, 0)

PACKAGE_HOOK = 'before:package:setupProviderConfiguration'


def check_version(version):
    """
    Raises UnsupportedHostVersion unless the host is new enough.
    """
    message = f"{TAG} requires serverless {MIN_HOST_VERSION.major}.{MIN_HOST_VERSION.minor} or higher!"
    try:
        parsed = semver.Version.parse(str(version), optional_minor_and_patch=True)
    except (TypeError, ValueError) as e:
        raise UnsupportedHostVersion(message) from e
    if parsed < MIN_HOST_VERSION:
        raise UnsupportedHostVersion(message)


class CustomRoles:
    """
    Replaces the shared execution role with one role per function.

    * service: a Service (or anything with the same functions/provider/resources)
    * version: the host's version string
    * naming: the host's naming resolver
    * log: the host's log, a callable taking one string
    """
    def __init__(self, service, *, version, naming, log=None):
        check_version(version)

        self.service = service
        self.naming = naming
        self.diagnostics = Diagnostics(log)
        self.synthesizer = RoleSynthesizer(
            naming,
            service,
            ResourceSink(service),
            self.diagnostics,
            provider=service.provider,
        )

        self.hooks = {
            PACKAGE_HOOK: lambda: self.create_roles(),
        }

    def get_streams_policy(self, function_name, function_spec):
        return self.synthesizer.get_streams_policy(function_name, function_spec)

    def create_roles(self):
        self.synthesizer.synthesize(self.service.get_all_functions())
