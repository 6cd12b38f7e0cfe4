"""
Tagged messages for the host's log.
"""
import pulumi

TAG = 'serverless-plugin-custom-roles'


class Diagnostics:
    """
    Formats messages as `[tag]: message` and hands them to a single sink.

    The sink is any callable taking one string, usually the host CLI's log. If
    none is given, messages go to the Pulumi engine log.
    """
    def __init__(self, sink=None, tag=TAG):
        if sink is None:
            sink = pulumi.info
        self.sink = sink
        self.tag = tag

    def log(self, message):
        self.sink(f"[{self.tag}]: {message}")

    def warn(self, message):
        self.log(f"WARNING: {message}")
