import logging
from flask import Blueprint, current_app, jsonify, request
from ride_service.errors import InvalidArgument
from ride_service.extensions import db
from ride_service.services.geocoder import get_geocoder
from ride_service.services.passenger_service import (
    create_passenger,
    delete_passenger,
    list_passengers,
)

logger = logging.getLogger(__name__)

passengers_bp = Blueprint('passengers', __name__)


@passengers_bp.route('/passengers', methods=['GET'])
def get_passengers():
    """
    List a driver's passengers, newest first
    ---
    tags:
      - Passengers
    parameters:
      - name: ownerId
        in: query
        type: string
        required: true
    responses:
      200:
        description: List of passengers
      400:
        description: ownerId missing
    """
    owner_id = (request.args.get('ownerId') or '').strip()
    if not owner_id:
        raise InvalidArgument('ownerId query parameter required')

    logger.info("Passenger list requested for owner %s", owner_id)
    passengers = list_passengers(db.session, owner_id)
    return jsonify([p.to_dict() for p in passengers]), 200


@passengers_bp.route('/passengers', methods=['POST'])
def add_passenger():
    """
    Register a passenger; the address is geocoded server-side
    ---
    tags:
      - Passengers
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - name
            - address
            - ownerId
          properties:
            name:
              type: string
            address:
              type: string
            ownerId:
              type: string
    responses:
      201:
        description: Passenger created
      400:
        description: Missing fields
    """
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        logger.info("New passenger submitted: %s", data.get('name'))

    fallback = (current_app.config['FALLBACK_LAT'], current_app.config['FALLBACK_LNG'])
    passenger = create_passenger(db.session, get_geocoder(), data, fallback)
    return jsonify(passenger.to_dict()), 201


@passengers_bp.route('/passengers/<passenger_id>', methods=['DELETE'])
def remove_passenger(passenger_id):
    """
    Delete a passenger
    ---
    tags:
      - Passengers
    parameters:
      - name: passenger_id
        in: path
        type: string
        required: true
    responses:
      200:
        description: Deleted (also returned when the passenger did not exist)
    """
    deleted = delete_passenger(db.session, passenger_id)
    if deleted:
        logger.info("Deleted passenger %s", passenger_id)
    return jsonify({'message': 'Passenger deleted'}), 200
