from ride_service.app import create_app
from ride_service.extensions import db
from ride_service.services.geocoder import Coordinates


class StubGeocoder:
    """Answers from a fixed address book instead of calling the network."""

    def __init__(self, known=None):
        self.known = dict(known or {})
        self.calls = []

    def resolve(self, address):
        self.calls.append(address)
        coords = self.known.get(address)
        return Coordinates(*coords) if coords else None


def make_app(geocoder=None, **overrides):
    config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'GEOCODER': geocoder or StubGeocoder(),
        'CORS_ORIGINS': ['*'],
        'AUTO_CREATE_TABLES': False,
        'LOG_LEVEL': 'WARNING',
    }
    config.update(overrides)
    app = create_app(config)
    with app.app_context():
        db.create_all()
    return app


def drop_app(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
