from unittest import mock

import pytest

from customroles import CustomRoles, Diagnostics, Naming, Service


@pytest.fixture
def log():
    return mock.Mock()


@pytest.fixture
def diagnostics(log):
    return Diagnostics(log)


@pytest.fixture
def make_plugin(log):
    """
    Builds a CustomRoles for a service called foo on the dev stage.
    """
    def _(*, functions=None, provider=None, resources=None, version='1.12.0'):
        service = Service('foo', provider=provider, functions=functions, resources=resources)
        return CustomRoles(service, version=version, naming=Naming('foo', 'dev'), log=log)
    return _
