import uuid
from datetime import datetime, timezone
from ride_service.extensions import db


class Passenger(db.Model):
    __tablename__ = 'passengers'

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = db.Column(db.Text, nullable=False, index=True)
    name = db.Column(db.Text, nullable=False)
    address = db.Column(db.Text, nullable=False)
    lat = db.Column(db.Float, nullable=False)
    lng = db.Column(db.Float, nullable=False)
    # Informational only, e.g. "New Pickup" or "Address Not Found"
    type = db.Column(db.String(64), nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def copy_for(self, owner_id):
        """Return an unsaved duplicate of this passenger owned by ``owner_id``."""
        return Passenger(
            owner_id=owner_id,
            name=self.name,
            address=self.address,
            lat=self.lat,
            lng=self.lng,
            type=self.type,
        )

    def to_dict(self):
        return {
            'id': str(self.id),
            'ownerId': self.owner_id,
            'name': self.name,
            'address': self.address,
            'lat': self.lat,
            'lng': self.lng,
            'type': self.type,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
