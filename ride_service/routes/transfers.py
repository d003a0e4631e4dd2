"""
Transfer Routes
POST /share  -> generate a code for a set of passengers
POST /import -> redeem a code, copying the passengers to the caller
"""

from flask import Blueprint, current_app, jsonify, request
from ride_service.extensions import db
from ride_service.services.transfer_service import create_transfer, redeem_transfer

transfers_bp = Blueprint('transfers', __name__)


@transfers_bp.route('/share', methods=['POST'])
def share_passengers():
    """
    Create a share code for a set of passengers
    ---
    tags:
      - Transfers
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - passengerIds
            - destination
          properties:
            passengerIds:
              type: array
              items:
                type: string
            destination:
              type: string
    responses:
      201:
        description: Code created
      400:
        description: Invalid input
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    code = create_transfer(
        db.session,
        data.get('passengerIds'),
        data.get('destination'),
        digits=current_app.config['TRANSFER_CODE_DIGITS'],
        attempts=current_app.config['TRANSFER_CODE_ATTEMPTS'],
    )
    return jsonify({'code': code}), 201


@transfers_bp.route('/import', methods=['POST'])
def import_passengers():
    """
    Redeem a share code
    ---
    tags:
      - Transfers
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - code
            - ownerId
          properties:
            code:
              type: string
            ownerId:
              type: string
    responses:
      200:
        description: Passengers copied to the new owner
      400:
        description: Missing fields
      404:
        description: Invalid or expired code
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    destination, passenger_ids = redeem_transfer(db.session, data.get('code'), data.get('ownerId'))
    return jsonify({
        'destination': destination,
        'passengerIds': passenger_ids,
    }), 200
