"""
Passenger Service
Handles passenger CRUD: list by owner, create (with geocoding), delete.
"""

import logging
import uuid
from ride_service.errors import InvalidArgument
from ride_service.models.passenger import Passenger

logger = logging.getLogger(__name__)

NEW_PICKUP = 'New Pickup'
ADDRESS_NOT_FOUND = 'Address Not Found'


def parse_passenger_id(value):
    """Return ``value`` as a UUID, or None if it is not a valid passenger id."""
    try:
        return uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


def _require_text(data, field):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def list_passengers(session, owner_id):
    """Passengers owned by ``owner_id``, newest first."""
    return (
        session.query(Passenger)
        .filter_by(owner_id=owner_id)
        .order_by(Passenger.created_at.desc())
        .all()
    )


def get_passengers_by_ids(session, passenger_ids):
    """
    Fetch the passengers that still exist among ``passenger_ids``.
    Unknown and malformed ids are dropped; order is whatever the store returns.
    """
    ids = [pid for pid in (parse_passenger_id(p) for p in passenger_ids) if pid]
    if not ids:
        return []
    return session.query(Passenger).filter(Passenger.id.in_(ids)).all()


def create_passenger(session, geocoder, data, fallback):
    """
    Create a passenger from ``{name, address, ownerId}``.

    Coordinates come from the geocoder; when it has no answer the passenger is
    stored at ``fallback`` (a ``(lat, lng)`` pair) and typed "Address Not Found".
    """
    if not isinstance(data, dict):
        data = {}
    name = _require_text(data, 'name')
    address = _require_text(data, 'address')
    owner_id = _require_text(data, 'ownerId')

    if not name or not address:
        raise InvalidArgument('Name and address required')
    if not owner_id:
        raise InvalidArgument('ownerId required')

    coords = geocoder.resolve(address)
    if coords is None:
        logger.warning("No coordinates for %r, using fallback location", address)
        lat, lng = fallback
        passenger_type = ADDRESS_NOT_FOUND
    else:
        lat, lng = coords.lat, coords.lng
        passenger_type = NEW_PICKUP

    passenger = Passenger(
        owner_id=owner_id,
        name=name,
        address=address,
        lat=lat,
        lng=lng,
        type=passenger_type,
    )
    session.add(passenger)
    session.commit()
    return passenger


def delete_passenger(session, passenger_id):
    """Delete by id. Unknown ids are not an error; returns whether a row went away."""
    pid = parse_passenger_id(passenger_id)
    if pid is None:
        return False

    deleted = session.query(Passenger).filter_by(id=pid).delete(synchronize_session=False)
    session.commit()
    return deleted > 0
