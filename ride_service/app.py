"""
Ride Service - Flask application
Passenger CRUD plus the share/import handoff between drivers.
"""

import logging
from datetime import datetime, timezone
from dotenv import load_dotenv
from flask import Flask, jsonify
from flasgger import Swagger
from ride_service.config import load_config
from ride_service.errors import register_error_handlers
from ride_service.extensions import cors, db
from ride_service.services.geocoder import create_geocoder

logger = logging.getLogger(__name__)


def create_app(config=None):
    load_dotenv()

    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize Extensions
    db.init_app(app)
    origins = app.config['CORS_ORIGINS']
    cors.init_app(app, origins=origins, send_wildcard=origins == ['*'])
    app.extensions['geocoder'] = app.config.get('GEOCODER') or create_geocoder(app.config)

    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec_1',
                "route": '/apispec_1.json',
                "rule_filter": lambda rule: True,
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/"
    }
    Swagger(app, config=swagger_config)

    register_error_handlers(app)

    # Register Blueprints
    from ride_service.routes.passengers import passengers_bp
    app.register_blueprint(passengers_bp)

    from ride_service.routes.transfers import transfers_bp
    app.register_blueprint(transfers_bp)

    from ride_service.cli import cli_bp
    app.register_blueprint(cli_bp)

    if app.config['AUTO_CREATE_TABLES']:
        with app.app_context():
            db.create_all()

    @app.route('/health')
    def health():
        try:
            db.session.execute(db.text('SELECT 1'))
            return jsonify({
                "status": "healthy",
                "service": "ride-service",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }), 200
        except Exception:
            db.session.rollback()
            logger.exception("Health check failed")
            return jsonify({"status": "unhealthy", "service": "ride-service"}), 503

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=3000)
