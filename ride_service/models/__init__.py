from ride_service.models.passenger import Passenger
from ride_service.models.transfer import Transfer

__all__ = ['Passenger', 'Transfer']
