import os


def _database_uri():
    url = (os.environ.get('DATABASE_URL') or '').strip()
    if url:
        return url

    db_user = os.environ.get('DB_USER', 'ride_svc_user')
    db_pass = os.environ.get('DB_PASS', 'password')
    db_host = os.environ.get('DB_HOST', 'rides-db')
    db_name = os.environ.get('DB_NAME', 'rides_db')
    return f"postgresql://{db_user}:{db_pass}@{db_host}/{db_name}"


def _flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def load_config():
    """Build the app config from environment variables (call after load_dotenv)."""
    return {
        'SQLALCHEMY_DATABASE_URI': _database_uri(),
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'GEOCODER_URL': os.environ.get('GEOCODER_URL', 'https://nominatim.openstreetmap.org/search'),
        'GEOCODER_TIMEOUT': float(os.environ.get('GEOCODER_TIMEOUT', '5.0')),
        'GEOCODER_USER_AGENT': os.environ.get('GEOCODER_USER_AGENT', 'ride-service/0.1'),
        # Tel Aviv city centre
        'FALLBACK_LAT': float(os.environ.get('FALLBACK_LAT', '32.0853')),
        'FALLBACK_LNG': float(os.environ.get('FALLBACK_LNG', '34.7818')),
        'TRANSFER_CODE_DIGITS': int(os.environ.get('TRANSFER_CODE_DIGITS', '4')),
        'TRANSFER_CODE_ATTEMPTS': int(os.environ.get('TRANSFER_CODE_ATTEMPTS', '10')),
        'CORS_ORIGINS': [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()],
        'AUTO_CREATE_TABLES': _flag('AUTO_CREATE_TABLES'),
        'LOG_LEVEL': os.environ.get('LOG_LEVEL', 'INFO').upper(),
    }
