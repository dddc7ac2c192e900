"""
Unit tests for service creation with substituted collaborators.
"""
import pytest
from swarmctl.MANAGERS.service_creator import ServiceCreator
from swarmctl.MODELS.create_options import ServiceCreateOptions
from swarmctl.errors import MissingMandatoryFieldError, NetworkNotFoundError, RemoteError


class FakeResolver:
    def __init__(self, networks=None):
        self.networks = networks or {}
        self.calls = []

    def resolve_network(self, name):
        self.calls.append(name)
        if name not in self.networks:
            raise NetworkNotFoundError(f"network {name} not found")
        return self.networks[name]


class FakeSubmitter:
    def __init__(self, error=None):
        self.error = error
        self.specs = []

    def create_service(self, spec):
        if self.error:
            raise self.error
        self.specs.append(spec)
        return f"svc-{len(self.specs)}"


class TestServiceCreator:
    """Tests for ServiceCreator."""

    def test_create(self):
        """Test a service is built and submitted."""
        submitter = FakeSubmitter()
        creator = ServiceCreator(FakeResolver(), submitter)
        service_id = creator.create(ServiceCreateOptions(name='web', image='nginx', ports=['http:80']))
        assert service_id == 'svc-1'
        assert submitter.specs[0].name == 'web'
        assert submitter.specs[0].endpoint.exposed_ports[0].published_port == 80

    def test_create_with_network(self):
        """Test the network name is resolved to its identifier."""
        resolver = FakeResolver({'frontend': 'net-42'})
        submitter = FakeSubmitter()
        creator = ServiceCreator(resolver, submitter)
        creator.create(ServiceCreateOptions(name='web', image='nginx', network='frontend'))
        assert resolver.calls == ['frontend']
        assert submitter.specs[0].networks[0].target == 'net-42'

    def test_unknown_network_submits_nothing(self):
        """Test a failed lookup aborts creation."""
        submitter = FakeSubmitter()
        creator = ServiceCreator(FakeResolver(), submitter)
        with pytest.raises(NetworkNotFoundError):
            creator.create(ServiceCreateOptions(name='web', image='nginx', network='missing'))
        assert submitter.specs == []

    def test_invalid_options_skip_lookup(self):
        """Test local validation runs before the network lookup."""
        resolver = FakeResolver({'frontend': 'net-42'})
        submitter = FakeSubmitter()
        creator = ServiceCreator(resolver, submitter)
        with pytest.raises(MissingMandatoryFieldError):
            creator.create(ServiceCreateOptions(image='nginx', network='frontend'))
        assert resolver.calls == []
        assert submitter.specs == []

    def test_remote_error_propagates(self):
        """Test submission errors reach the caller unchanged."""
        error = RemoteError("name conflicts with an existing object", status=409)
        creator = ServiceCreator(FakeResolver(), FakeSubmitter(error=error))
        with pytest.raises(RemoteError) as excinfo:
            creator.create(ServiceCreateOptions(name='web', image='nginx'))
        assert excinfo.value is error
