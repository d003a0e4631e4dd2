"""
Transfer Model
A pending share code pointing at a frozen list of passenger ids.
Deleted when redeemed; never expires otherwise.
"""

from datetime import datetime, timezone
from sqlalchemy.dialects.postgresql import JSONB
from ride_service.extensions import db


class Transfer(db.Model):
    __tablename__ = 'transfers'

    code = db.Column(db.String(32), primary_key=True)
    passenger_ids = db.Column(
        db.JSON().with_variant(JSONB, 'postgresql'),
        nullable=False
    )
    destination = db.Column(db.Text, nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self):
        return {
            'code': self.code,
            'passengerIds': list(self.passenger_ids or []),
            'destination': self.destination,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
