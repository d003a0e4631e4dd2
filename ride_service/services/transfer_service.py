"""
Transfer Service
Share/import handoff between drivers.

   - create_transfer(session, passenger_ids, destination) -> code
   - redeem_transfer(session, code, new_owner_id) -> (destination, new ids)

A code is claimed by deleting its row; only the request whose DELETE removed
the row goes on to copy passengers, and the copies commit in the same
transaction as the delete.
"""

import logging
import secrets
from sqlalchemy.exc import IntegrityError
from ride_service.errors import InvalidArgument, NotFound, StoreFailure
from ride_service.models.transfer import Transfer
from ride_service.services.passenger_service import get_passengers_by_ids

logger = logging.getLogger(__name__)

CODE_PREFIX = 'TR-'


def generate_code(digits=4):
    return CODE_PREFIX + ''.join(str(secrets.randbelow(10)) for _ in range(digits))


def _validate_passenger_ids(passenger_ids):
    if not isinstance(passenger_ids, list) or not passenger_ids:
        raise InvalidArgument('passengerIds must be a non-empty list')
    if not all(isinstance(pid, str) and pid.strip() for pid in passenger_ids):
        raise InvalidArgument('passengerIds must contain passenger id strings')
    return [pid.strip() for pid in passenger_ids]


def create_transfer(session, passenger_ids, destination, digits=4, attempts=10):
    """
    Store a new transfer code for ``passenger_ids`` and return it.

    The ids are kept as given, whether or not they exist right now.
    """
    passenger_ids = _validate_passenger_ids(passenger_ids)
    if not isinstance(destination, str) or not destination.strip():
        raise InvalidArgument('destination required')
    destination = destination.strip()

    for _ in range(attempts):
        code = generate_code(digits)
        if session.get(Transfer, code) is not None:
            continue

        session.add(Transfer(code=code, passenger_ids=passenger_ids, destination=destination))
        try:
            session.commit()
        except IntegrityError:
            # Another request took the same code between the check and the insert
            session.rollback()
            continue

        logger.info("Created transfer %s for %d passenger(s) to %r", code, len(passenger_ids), destination)
        return code

    raise StoreFailure('Could not allocate a unique transfer code')


def redeem_transfer(session, code, new_owner_id):
    """
    Copy the passengers behind ``code`` to ``new_owner_id`` and consume the code.

    Returns ``(destination, new_passenger_ids)``. Referenced passengers that no
    longer exist are skipped. Raises ``NotFound`` when the code is unknown or
    was already redeemed.
    """
    if not isinstance(code, str) or not code.strip():
        raise InvalidArgument('code required')
    if not isinstance(new_owner_id, str) or not new_owner_id.strip():
        raise InvalidArgument('ownerId required')
    code = code.strip().upper()
    new_owner_id = new_owner_id.strip()

    transfer = session.get(Transfer, code)
    if transfer is None:
        raise NotFound('Invalid or expired code')

    passenger_ids = list(transfer.passenger_ids or [])
    destination = transfer.destination

    claimed = session.query(Transfer).filter_by(code=code).delete(synchronize_session=False)
    if not claimed:
        session.rollback()
        raise NotFound('Invalid or expired code')

    sources = get_passengers_by_ids(session, passenger_ids)
    copies = [source.copy_for(new_owner_id) for source in sources]
    session.add_all(copies)
    session.flush()
    new_ids = [str(copy.id) for copy in copies]
    session.commit()

    skipped = len(passenger_ids) - len(copies)
    if skipped:
        logger.info("Transfer %s: %d referenced passenger(s) no longer exist", code, skipped)
    logger.info("Redeemed transfer %s for owner %s (%d copied)", code, new_owner_id, len(new_ids))
    return destination, new_ids
