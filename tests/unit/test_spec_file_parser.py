import pytest
import yaml
from swarmctl.PARSERS.spec_file_parser import SpecFileParser
from swarmctl.MODELS.service_spec import GlobalService, PortProtocol, ReplicatedService
from swarmctl.errors import InvalidProtocolError, SpecFileError


def test_parse(tmp_path):
    spec_content = {
        'name': 'web',
        'task': {
            'container': {
                'image': 'nginx:latest',
                'command': ['nginx'],
                'env': ['DEBUG=true'],
            }
        },
        'mode': {'kind': 'replicated', 'instances': 3},
        'endpoint': {
            'exposed_ports': [
                {'name': 'http', 'published_port': 80, 'target_port': 8080},
            ]
        },
        'networks': [{'target': 'net1'}],
    }

    spec_file = tmp_path / "service.yml"
    with open(spec_file, 'w') as f:
        yaml.dump(spec_content, f)

    spec = SpecFileParser().parse(str(spec_file))

    assert spec.name == 'web'
    assert spec.task.container.image == 'nginx:latest'
    assert spec.task.container.env == ['DEBUG=true']
    assert spec.mode == ReplicatedService(instances=3)
    assert spec.endpoint.exposed_ports[0].protocol == PortProtocol.TCP
    assert spec.endpoint.exposed_ports[0].target_port == 8080
    assert spec.networks[0].target == 'net1'


def test_shorthand_mode_and_ports():
    content = """
name: dns
task:
  container:
    image: coredns
mode: global
endpoint:
  exposed_ports:
    - dns:53/udp
    - metrics:9153
"""
    spec = SpecFileParser().parse_from_string(content)
    assert spec.mode == GlobalService()
    assert [(p.name, p.protocol) for p in spec.endpoint.exposed_ports] == [
        ('dns', PortProtocol.UDP),
        ('metrics', PortProtocol.TCP),
    ]


def test_mode_defaults_to_replicated():
    spec = SpecFileParser().parse_from_string("name: a\ntask: {container: {image: b}}\n")
    assert spec.mode == ReplicatedService(instances=1)
    assert spec.endpoint is None


def test_bad_port_entry():
    content = "name: a\ntask: {container: {image: b}}\nendpoint: {exposed_ports: ['x:1/sctp']}\n"
    with pytest.raises(InvalidProtocolError):
        SpecFileParser().parse_from_string(content)


@pytest.mark.parametrize('content', [
    '',
    '- a\n- b\n',
    'name: [unclosed',
    'task: {container: {image: b}}\n',
    'name: a\ntask: {container: {image: ""}}\n',
    'name: a\ntask: {container: {image: b}}\nmode: sometimes\n',
])
def test_invalid_documents(content):
    with pytest.raises(SpecFileError):
        SpecFileParser().parse_from_string(content)


def test_missing_file(tmp_path):
    with pytest.raises(SpecFileError, match='cannot read spec file'):
        SpecFileParser().parse(str(tmp_path / 'missing.yml'))


def test_undecodable_file(tmp_path):
    spec_file = tmp_path / 'service.yml'
    spec_file.write_bytes(b'name: \xff\xfe\n')
    with pytest.raises(SpecFileError, match='cannot read spec file'):
        SpecFileParser().parse(str(spec_file))
