"""
Default names for things, the same way the serverless framework picks them.
"""


def normalize_name(name):
    """
    Makes a name safe for use in a CloudFormation logical id.

    >>> normalize_name('my-func_name')
    'MyDashfuncUnderscorename'
    """
    name = name.replace('-', 'Dash').replace('_', 'Underscore')
    return name[:1].upper() + name[1:]


class Naming:
    """
    Resolves logical ids and the stack name for a service deployed to a stage.
    """
    def __init__(self, service, stage):
        self.service = service
        self.stage = stage

    def get_normalized_function_name(self, function_name):
        return normalize_name(function_name)

    def get_lambda_logical_id(self, function_name):
        return f"{self.get_normalized_function_name(function_name)}LambdaFunction"

    def get_stack_name(self):
        return f"{self.service}-{self.stage}"
