"""
The bits of a service definition that role generation reads and writes.
"""

__all__ = 'Service', 'ResourceSink'


class Service:
    """
    A serverless-style service: a provider block, some functions, and the
    CloudFormation resources to deploy alongside them.

    `resources` stays None until something is added to it.
    """
    def __init__(self, name, *, provider=None, functions=None, resources=None):
        self.name = name
        self.provider = provider or {}
        # An empty function in YAML comes through as None
        self.functions = {
            fname: spec if spec is not None else {}
            for fname, spec in (functions or {}).items()
        }
        self.resources = resources

    def get_all_functions(self):
        """
        Function names, in declaration order.
        """
        return list(self.functions)

    def get_function(self, name):
        return self.functions[name]

    def get_roles(self):
        """
        Maps function names to their role, for those that have one.
        """
        return {
            fname: spec['role']
            for fname, spec in self.functions.items()
            if 'role' in spec
        }


class ResourceSink:
    """
    Adds resources to a service's `{'Resources': {...}}` template, creating the
    template on first use.
    """
    def __init__(self, service):
        self.service = service

    def add(self, logical_id, resource):
        if self.service.resources is None:
            self.service.resources = {}
        template = self.service.resources
        if template.get('Resources') is None:
            template['Resources'] = {}
        template['Resources'][logical_id] = resource
