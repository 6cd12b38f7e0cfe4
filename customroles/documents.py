"""
Building blocks for IAM documents, as CloudFormation wants them.
"""

POLICY_VERSION = '2012-10-17'

LAMBDA_PRINCIPAL = 'lambda.amazonaws.com'

VPC_ACCESS_POLICY_ARN = 'arn:aws:iam::aws:policy/service-role/AWSLambdaVPCAccessExecutionRole'


def ref(name):
    return {'Ref': name}


def join(delimiter, parts):
    return {'Fn::Join': [delimiter, list(parts)]}


def policy(name, statements):
    """
    An inline role policy, eg an entry in AWS::IAM::Role's Policies
    """
    return {
        'PolicyName': name,
        'PolicyDocument': {
            'Version': POLICY_VERSION,
            'Statement': statements,
        },
    }


def trust_policy():
    """
    Lets Lambda assume the role. A new copy every time, since the caller owns it.
    """
    return {
        'Version': POLICY_VERSION,
        'Statement': [{
            'Effect': 'Allow',
            'Principal': {
                'Service': [LAMBDA_PRINCIPAL],
            },
            'Action': 'sts:AssumeRole',
        }],
    }
