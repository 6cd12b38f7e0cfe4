from unittest import mock

import pulumi
import pytest

from customroles import UnsupportedHostVersion
from customroles import program


class FakeConfig:
    """
    Just enough of pulumi.Config, backed by a dict.
    """
    def __init__(self, values):
        self.values = values

    def get(self, key):
        return self.values.get(key)

    def require(self, key):
        if key not in self.values:
            raise pulumi.ConfigMissingError(key, False)
        return self.values[key]

    get_object = get
    require_object = require


def make_config(**values):
    values.setdefault('service', 'foo')
    values.setdefault('stage', 'dev')
    values.setdefault('frameworkVersion', '1.12.0')
    return FakeConfig(values)


def test_create_roles():
    config = make_config(
        provider={'iamRoleStatements': [{'Effect': 'Allow', 'Action': ['s3:*'], 'Resource': '*'}]},
        functions={
            'hello': {'events': [{'stream': {'type': 'kinesis', 'arn': 'arn:aws:kinesis:r:a:stream/s'}}]},
            'world': None,
        },
    )

    service = program.create_roles(config, log=mock.Mock())

    assert service.get_roles() == {
        'hello': 'HelloLambdaFunctionRole',
        'world': 'WorldLambdaFunctionRole',
    }
    hello = service.resources['Resources']['HelloLambdaFunctionRole']
    assert [p['PolicyName'] for p in hello['Properties']['Policies']] == ['logging', 'shared', 'streams']
    log_group = hello['Properties']['Policies'][0]['PolicyDocument']['Statement'][0]['Resource'][0]
    assert log_group['Fn::Join'][1][-1] == 'log-group:/aws/lambda/foo-dev-hello:*'


def test_stage_argument_wins():
    config = make_config(functions={'hello': {}})

    service = program.create_roles(config, stage='prod', log=mock.Mock())

    role = service.resources['Resources']['HelloLambdaFunctionRole']
    statement = role['Properties']['Policies'][0]['PolicyDocument']['Statement'][0]
    assert statement['Resource'][0]['Fn::Join'][1][-1] == 'log-group:/aws/lambda/foo-prod-hello:*'


def test_no_functions():
    log = mock.Mock()

    service = program.create_roles(make_config(), log=log)

    assert service.resources is None
    log.assert_called_once_with('[serverless-plugin-custom-roles]: No functions to add roles to')


def test_old_framework():
    with pytest.raises(UnsupportedHostVersion):
        program.create_roles(make_config(frameworkVersion='1.2.0'), log=mock.Mock())


def test_missing_service():
    config = FakeConfig({'frameworkVersion': '1.12.0', 'stage': 'dev'})
    with pytest.raises(pulumi.ConfigMissingError):
        program.create_roles(config, log=mock.Mock())


def test_main_exports():
    config = make_config(functions={'hello': {}})
    with mock.patch('pulumi.Config', return_value=config) as Config, \
            mock.patch('pulumi.export') as export, \
            mock.patch('pulumi.info'):
        program.main()

    Config.assert_called_once_with('customroles')
    exported = dict(c.args for c in export.call_args_list)
    assert set(exported['resources']['Resources']) == {'HelloLambdaFunctionRole'}
    assert exported['roles'] == {'hello': 'HelloLambdaFunctionRole'}
