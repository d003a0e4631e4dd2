"""
Service errors and their HTTP mapping.

Services raise these; the handlers registered in ``register_error_handlers``
turn them into ``{"error": ...}`` JSON responses. Database errors are logged
and reported with a generic message.
"""

import logging
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from ride_service.extensions import db

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidArgument(ServiceError):
    status_code = 400


class NotFound(ServiceError):
    status_code = 404


class StoreFailure(ServiceError):
    status_code = 500


class GeocodingError(Exception):
    """Geocoder unreachable or returned something unparseable."""


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        if e.status_code >= 500:
            logger.error('Service failure: %s', e.message)
        return jsonify({'error': e.message}), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        logger.exception('Database error: %s', e)
        return jsonify({'error': 'Database error'}), 500
