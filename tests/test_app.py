"""
Tests for the application factory and JSON error rendering.
"""
from nodues import create_app
from nodues.models.database import check_connection
from nodues.services import ClearanceService
from nodues.utils import create_response
from nodues.utils.exceptions import DuplicateActiveRequest, RequestNotFound, PersistenceFailure


def test_testing_config_selected(app):
    assert app.config['TESTING'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert check_connection() is True


def test_each_app_gets_a_fresh_database(app, student):
    ClearanceService.create_request(student.id)

    other = create_app('testing')
    with other.app_context():
        assert ClearanceService.summarize()['total'] == 0


def test_create_response_shape():
    assert create_response(True, "ok") == {'ok': True, 'message': "ok"}
    assert create_response(False, "bad", {'x': 1}) == {'ok': False, 'message': "bad", 'data': {'x': 1}}


class TestErrorHandler:

    def _client_raising(self, app, error):
        def boom():
            raise error
        app.add_url_rule('/boom', 'boom', boom)
        return app.test_client()

    def test_not_found_maps_to_404(self, app):
        response = self._client_raising(app, RequestNotFound("Request 9 not found")).get('/boom')

        assert response.status_code == 404
        assert response.get_json() == {
            'ok': False, 'message': "Request 9 not found", 'data': {'error': 'RequestNotFound'}
        }

    def test_duplicate_includes_existing_request(self, app):
        error = DuplicateActiveRequest("already active", existing_request_id=3)
        response = self._client_raising(app, error).get('/boom')

        assert response.status_code == 409
        assert response.get_json()['data']['existing_request_id'] == 3

    def test_server_errors_map_to_500(self, app):
        response = self._client_raising(app, PersistenceFailure("db down")).get('/boom')
        assert response.status_code == 500

    def test_service_errors_surface_through_routes(self, app, student):
        def submit():
            return create_response(True, "created", ClearanceService.create_request(student.id).to_dict())
        app.add_url_rule('/submit', 'submit', submit, methods=['POST'])
        client = app.test_client()

        assert client.post('/submit').status_code == 200
        second = client.post('/submit')
        assert second.status_code == 409
        assert second.get_json()['data']['error'] == 'DuplicateActiveRequest'
