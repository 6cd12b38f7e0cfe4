from customroles.service import ResourceSink, Service


def test_function_order_and_lookup():
    functions = {'b': {'handler': 'b.main'}, 'a': None}
    service = Service('svc', functions=functions)

    assert service.get_all_functions() == ['b', 'a']
    assert service.get_function('b') is functions['b']
    assert service.get_function('a') == {}


def test_defaults():
    service = Service('svc')
    assert service.provider == {}
    assert service.get_all_functions() == []
    assert service.resources is None
    assert service.get_roles() == {}


def test_sink_creates_template_lazily():
    service = Service('svc')
    sink = ResourceSink(service)
    assert service.resources is None

    sink.add('Thing', {'Type': 'AWS::IAM::Role'})

    assert service.resources == {'Resources': {'Thing': {'Type': 'AWS::IAM::Role'}}}


def test_sink_keeps_existing_template():
    template = {'Outputs': {'Out': {}}}
    service = Service('svc', resources=template)

    ResourceSink(service).add('Thing', {})

    assert service.resources is template
    assert template == {'Outputs': {'Out': {}}, 'Resources': {'Thing': {}}}


def test_sink_replaces_empty_resources_key():
    # `Resources:` with nothing under it in YAML
    service = Service('svc', resources={'Resources': None})

    ResourceSink(service).add('Thing', {})

    assert service.resources == {'Resources': {'Thing': {}}}
