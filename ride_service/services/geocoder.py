"""
Geocoder
Resolves a free-text address to coordinates through a Nominatim-compatible
search endpoint. ``resolve`` never raises: a miss or an upstream failure both
come back as ``None`` and the caller picks the fallback location.
"""

import logging
from collections import namedtuple
import requests
from flask import current_app
from ride_service.errors import GeocodingError

logger = logging.getLogger(__name__)

Coordinates = namedtuple('Coordinates', ['lat', 'lng'])


class Geocoder:
    def __init__(self, url, timeout=5.0, user_agent='ride-service/0.1'):
        self.url = url
        self.timeout = timeout
        self.user_agent = user_agent

    def lookup(self, address):
        """
        Query the search endpoint.

        Returns ``Coordinates`` or ``None`` when the address is unknown.
        Raises ``GeocodingError`` on network, HTTP or parse failures.
        """
        try:
            response = requests.get(
                self.url,
                params={'q': address, 'format': 'json', 'limit': 1},
                headers={'User-Agent': self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GeocodingError(f"Geocoder unreachable: {e}") from e

        if response.status_code != 200:
            raise GeocodingError(f"Geocoder returned {response.status_code}: {response.text[:200]}")

        try:
            results = response.json()
            if not results:
                return None
            first = results[0]
            return Coordinates(float(first['lat']), float(first['lon']))
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GeocodingError(f"Malformed geocoder response: {e}") from e

    def resolve(self, address):
        try:
            return self.lookup(address)
        except GeocodingError as e:
            logger.warning("Geocoding failed for %r: %s", address, e)
            return None


def create_geocoder(config):
    return Geocoder(
        url=config['GEOCODER_URL'],
        timeout=config['GEOCODER_TIMEOUT'],
        user_agent=config['GEOCODER_USER_AGENT'],
    )


def get_geocoder():
    return current_app.extensions['geocoder']
