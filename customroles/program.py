"""
Runs role generation as a Pulumi program, reading the service definition from
stack config:

    config:
      customroles:service: my-service
      customroles:frameworkVersion: 1.30.0
      customroles:functions:
        hello:
          events:
            - stream: arn:aws:dynamodb:us-east-1:123456789012:table/t/stream/*
"""
import pulumi

from .naming import Naming
from .plugin import PACKAGE_HOOK, CustomRoles
from .service import Service

CONFIG_NAMESPACE = 'customroles'


def load_service(config):
    return Service(
        config.require('service'),
        provider=config.get_object('provider'),
        functions=config.get_object('functions'),
        resources=config.get_object('resources'),
    )


def create_roles(config, *, stage=None, log=None):
    """
    Loads the service from config and gives each of its functions a role.
    """
    service = load_service(config)
    if stage is None:
        stage = config.get('stage') or pulumi.get_stack()

    plugin = CustomRoles(
        service,
        version=config.require('frameworkVersion'),
        naming=Naming(service.name, stage),
        log=log,
    )
    plugin.hooks[PACKAGE_HOOK]()
    return service


def main():
    service = create_roles(pulumi.Config(CONFIG_NAMESPACE))
    pulumi.export('resources', service.resources)
    pulumi.export('roles', service.get_roles())
