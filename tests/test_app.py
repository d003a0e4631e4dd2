import unittest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from ride_service.extensions import db
from ride_service.models.passenger import Passenger
from ride_service.services.geocoder import Geocoder
from tests.support import drop_app, make_app


class TestApp(unittest.TestCase):
    def setUp(self):
        self.app = make_app()
        self.client = self.app.test_client()

    def tearDown(self):
        drop_app(self.app)

    def test_health(self):
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['status'], 'healthy')

    def test_cors_header(self):
        resp = self.client.get('/passengers?ownerId=u1', headers={'Origin': 'http://phone.local'})
        self.assertEqual(resp.headers.get('Access-Control-Allow-Origin'), '*')

    def test_cors_with_listed_origins(self):
        app = make_app(CORS_ORIGINS=['http://phone.local'])
        try:
            client = app.test_client()
            resp = client.get('/passengers?ownerId=u1', headers={'Origin': 'http://phone.local'})
            self.assertEqual(resp.headers.get('Access-Control-Allow-Origin'), 'http://phone.local')

            resp = client.get('/passengers?ownerId=u1', headers={'Origin': 'http://evil.local'})
            self.assertIsNone(resp.headers.get('Access-Control-Allow-Origin'))
        finally:
            drop_app(app)

    def test_health_hides_database_error(self):
        with patch.object(db.session, 'execute',
                          side_effect=OperationalError('SELECT 1', {}, Exception('password=hunter2'))):
            resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.get_json(), {'status': 'unhealthy', 'service': 'ride-service'})

    def test_swagger_spec_lists_routes(self):
        resp = self.client.get('/apispec_1.json')
        self.assertEqual(resp.status_code, 200)
        paths = resp.get_json()['paths']
        for path in ('/passengers', '/share', '/import'):
            self.assertIn(path, paths)

    def test_default_geocoder_from_config(self):
        app = make_app(geocoder=None, GEOCODER=None, GEOCODER_URL='http://geo.test/search', GEOCODER_TIMEOUT=1.0)
        try:
            geocoder = app.extensions['geocoder']
            self.assertIsInstance(geocoder, Geocoder)
            self.assertEqual(geocoder.url, 'http://geo.test/search')
            self.assertEqual(geocoder.timeout, 1.0)
        finally:
            drop_app(app)

    def test_seed_demo_command(self):
        runner = self.app.test_cli_runner()
        result = runner.invoke(args=['seed-demo', '--owner', 'u9'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Seeded 5 passengers for u9', result.output)

        with self.app.app_context():
            rows = db.session.query(Passenger).filter_by(owner_id='u9').all()
        self.assertEqual(len(rows), 5)
        self.assertIn('David Cohen', {p.name for p in rows})

    def test_init_db_command(self):
        result = self.app.test_cli_runner().invoke(args=['init-db'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Database tables created', result.output)


if __name__ == '__main__':
    unittest.main()
