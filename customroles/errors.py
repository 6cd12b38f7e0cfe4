class CustomRolesError(Exception):
    """
    Base for errors raised by customroles
    """


class UnsupportedHostVersion(CustomRolesError):
    """
    Raised if the host reports a version older than the one we support
    """
