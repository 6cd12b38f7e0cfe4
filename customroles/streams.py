"""
Stream event sources, and the permissions a function needs to read them.

A function's `stream` event is either a bare ARN or an object:

    events:
      - stream: arn:aws:dynamodb:us-east-1:123456789012:table/foo/stream/*
      - stream:
          type: kinesis
          arn: arn:aws:kinesis:us-east-1:123456789012:stream/bar

Bare ARNs are always DynamoDB streams. Objects without a type get it from the
service part of the ARN.
"""
from dataclasses import dataclass
from typing import Optional

from .documents import policy

__all__ = (
    'ArnOnly', 'Described', 'StreamSource', 'parse_stream', 'normalize',
    'get_streams_policy',
)

DEFAULT_STREAM_TYPE = 'dynamodb'

STREAM_ACTIONS = {
    'dynamodb': [
        'dynamodb:GetRecords',
        'dynamodb:GetShardIterator',
        'dynamodb:DescribeStream',
        'dynamodb:ListStreams',
    ],
    'kinesis': [
        'kinesis:GetRecords',
        'kinesis:GetShardIterator',
        'kinesis:DescribeStream',
        'kinesis:ListStreams',
    ],
}

MALFORMED_SOURCE = (
    "Stream event source for function '{}' is not configured properly. "
    "IAM permissions will not be set properly."
)
UNSUPPORTED_TYPE = (
    "Stream event type for function '{}' is not configured properly. "
    "IAM permissions will not be set properly."
)


@dataclass(frozen=True)
class ArnOnly:
    """
    `stream: <arn>`
    """
    arn: str


@dataclass(frozen=True)
class Described:
    """
    `stream: {type: ..., arn: ...}`, type optional
    """
    arn: object
    type: Optional[str] = None


@dataclass(frozen=True)
class StreamSource:
    type: Optional[str]
    arn: object


def service_of(arn):
    """
    Gets the service part of an ARN (arn:partition:service:...), or None.
    """
    if not isinstance(arn, str):
        return None
    parts = arn.split(':')
    if len(parts) < 3:
        return None
    return parts[2]


def parse_stream(value):
    """
    Turns a `stream` event value into an ArnOnly or Described, or None if it
    doesn't look like either.
    """
    if isinstance(value, str):
        return ArnOnly(value) if value else None
    if isinstance(value, dict) and value.get('arn'):
        return Described(value['arn'], value.get('type') or None)
    return None


def normalize(descriptor):
    if isinstance(descriptor, ArnOnly):
        return StreamSource(DEFAULT_STREAM_TYPE, descriptor.arn)
    elif descriptor.type:
        return StreamSource(descriptor.type, descriptor.arn)
    else:
        # Not checked against STREAM_ACTIONS here; unknown services fall
        # through to the unsupported type warning.
        return StreamSource(service_of(descriptor.arn), descriptor.arn)


def first_stream(function_spec):
    """
    The `stream` of the first event that has one, or None.
    """
    for event in function_spec.get('events') or ():
        if isinstance(event, dict) and event.get('stream') is not None:
            return event['stream']
    return None


def get_streams_policy(function_name, function_spec, diagnostics):
    """
    Builds the `streams` policy for the function's first stream event.

    Returns None if the function has no stream events, or if the stream can't
    be understood (in which case a warning is logged).
    """
    stream = first_stream(function_spec)
    if stream is None:
        return None

    descriptor = parse_stream(stream)
    if descriptor is None:
        diagnostics.warn(MALFORMED_SOURCE.format(function_name))
        return None

    source = normalize(descriptor)
    actions = STREAM_ACTIONS.get(source.type)
    if actions is None:
        diagnostics.warn(UNSUPPORTED_TYPE.format(function_name))
        return None

    return policy('streams', [{
        'Effect': 'Allow',
        'Action': list(actions),
        'Resource': [source.arn],
    }])
