"""
Code to generate AWS IAM roles for lambda functions, one per function, based on
the statements and event sources each of them declares.

Every role gets, in this order:
 * logging: write to the function's own log group
 * custom: the function's iamRoleStatements, or
   shared: the provider's iamRoleStatements, if the function has none
 * streams: read from the function's stream event source, if any
"""
import pulumi

from .documents import (
    VPC_ACCESS_POLICY_ARN, join, policy, ref, trust_policy,
)
from .streams import get_streams_policy

__all__ = 'RoleSynthesizer', 'generate_role', 'logging_policy', 'statements_policy'

ROLE_SUFFIX = 'Role'


def log_group_arn(resource):
    # Region and account are left for CloudFormation to fill in
    return join(':', [
        'arn:aws:logs',
        ref('AWS::Region'),
        ref('AWS::AccountId'),
        resource,
    ])


def logging_policy(stack_name, function_name):
    """
    Lets the function write to /aws/lambda/<stack>-<function>, and nothing else.
    """
    log_group = f'log-group:/aws/lambda/{stack_name}-{function_name}'
    return policy('logging', [
        {
            'Effect': 'Allow',
            'Action': ['logs:CreateLogStream'],
            'Resource': [log_group_arn(f'{log_group}:*')],
        },
        {
            'Effect': 'Allow',
            'Action': ['logs:PutLogEvents'],
            'Resource': [log_group_arn(f'{log_group}:*:*')],
        },
    ])


def statements_policy(name, statements):
    """
    Wraps the given statements up as a policy, or None if there aren't any.
    """
    if not statements:
        return None
    return policy(name, list(statements))


def generate_role(policies, *, managed_policy_arns=(), permissions_boundary=None):
    """
    Assembles an AWS::IAM::Role resource for a lambda function.
    """
    properties = {
        'AssumeRolePolicyDocument': trust_policy(),
        'Policies': list(policies),
    }
    if managed_policy_arns:
        properties['ManagedPolicyArns'] = list(managed_policy_arns)
    if permissions_boundary is not None:
        properties['PermissionsBoundary'] = permissions_boundary
    return {
        'Type': 'AWS::IAM::Role',
        'Properties': properties,
    }


class RoleSynthesizer:
    """
    Gives each function its own role.

    The two things this is allowed to change are the function definitions it
    gets from `functions` (their `role` is set) and `resources`, which gains one
    role per function.

    * naming: get_lambda_logical_id(name), get_stack_name()
    * functions: get_function(name) -> function definition (a dict)
    * resources: add(logical_id, resource)
    * diagnostics: log(message), warn(message)
    * provider: the provider block, for shared statements and defaults
    """
    def __init__(self, naming, functions, resources, diagnostics, provider=None):
        self.naming = naming
        self.functions = functions
        self.resources = resources
        self.diagnostics = diagnostics
        self.provider = provider or {}

    def role_logical_id(self, function_name):
        return self.naming.get_lambda_logical_id(function_name) + ROLE_SUFFIX

    def get_streams_policy(self, function_name, function_spec):
        return get_streams_policy(function_name, function_spec, self.diagnostics)

    def get_policies(self, function_name, function_spec):
        policies = [
            logging_policy(self.naming.get_stack_name(), function_name),
        ]

        statements = (
            statements_policy('custom', function_spec.get('iamRoleStatements'))
            or statements_policy('shared', self.provider.get('iamRoleStatements'))
        )
        if statements is not None:
            policies.append(statements)

        streams = self.get_streams_policy(function_name, function_spec)
        if streams is not None:
            policies.append(streams)

        return policies

    def build_role(self, function_name, function_spec):
        managed = []
        if function_spec.get('vpc') or self.provider.get('vpc'):
            managed.append(VPC_ACCESS_POLICY_ARN)

        return generate_role(
            self.get_policies(function_name, function_spec),
            managed_policy_arns=managed,
            permissions_boundary=self.provider.get('rolePermissionsBoundary'),
        )

    def synthesize(self, function_names):
        """
        Builds and registers a role for each of the named functions, in order.
        """
        function_names = list(function_names)
        if not function_names:
            self.diagnostics.log("No functions to add roles to")
            return

        for name in function_names:
            function_spec = self.functions.get_function(name)
            role_id = self.role_logical_id(name)
            role = self.build_role(name, function_spec)

            self.resources.add(role_id, role)
            function_spec['role'] = role_id
            pulumi.debug(f"Generated role {role_id} for function {name}")
