"""
Tests for the central error handlers.
"""
import json

import pytest

from levantflow.errors import INTERNAL_ERROR, ROUTE_NOT_FOUND


@pytest.mark.parametrize('path', ['/missing', '/api/v1/users', '/health/deep'])
def test_unknown_path_returns_404(client, path):
    """Unmatched paths return the route-not-found body."""
    response = client.get(path)
    assert response.status_code == 404

    data = json.loads(response.data)
    assert data['message'] == ROUTE_NOT_FOUND
    assert data['timestamp'].endswith('Z')


@pytest.mark.parametrize('method', ['post', 'put', 'delete', 'patch'])
def test_unsupported_method_returns_404(client, method):
    """Known paths with other methods are treated as unmatched routes."""
    response = getattr(client, method)('/health')
    assert response.status_code == 404
    assert json.loads(response.data)['message'] == ROUTE_NOT_FOUND


def _add_failing_route(app):
    @app.route('/boom')
    def boom():
        raise RuntimeError('kaboom')
    return app


def test_fault_hides_detail_outside_development(make_app):
    """A view fault becomes a 500 without an error field."""
    client = _add_failing_route(make_app()).test_client()

    response = client.get('/boom')
    assert response.status_code == 500

    data = json.loads(response.data)
    assert data == {'message': INTERNAL_ERROR}


def test_fault_exposes_detail_in_development(make_app):
    """In development mode the fault message is returned."""
    app = _add_failing_route(make_app(ENVIRONMENT='development', EXPOSE_ERROR_DETAILS=True))
    client = app.test_client()

    data = json.loads(client.get('/boom').data)
    assert data['message'] == INTERNAL_ERROR
    assert data['error'] == 'kaboom'


def test_fault_is_logged(make_app, caplog):
    """Faults are logged server-side with their traceback."""
    client = _add_failing_route(make_app()).test_client()

    with caplog.at_level('ERROR', logger='levantflow.errors'):
        client.get('/boom')

    records = [r for r in caplog.records if r.name == 'levantflow.errors']
    assert records
    assert records[0].exc_info is not None


def test_service_keeps_serving_after_fault(make_app):
    """A fault does not affect later requests."""
    client = _add_failing_route(make_app()).test_client()

    assert client.get('/boom').status_code == 500
    assert client.get('/health').status_code == 200


def test_fault_responses_carry_security_headers(make_app):
    """Response hooks still run for error responses."""
    client = _add_failing_route(make_app()).test_client()
    response = client.get('/boom')
    assert response.headers['X-Frame-Options'] == 'DENY'


@pytest.mark.parametrize('method', ['post', 'put', 'delete', 'patch'])
def test_unsupported_method_on_root_returns_404(client, method):
    """The root path only answers GET."""
    response = getattr(client, method)('/')
    assert response.status_code == 404
    assert json.loads(response.data)['message'] == ROUTE_NOT_FOUND

