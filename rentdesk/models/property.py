from datetime import datetime

from ..extensions import db
from ..utils import iso, money

PROPERTY_TYPES = ("house", "apartment")

PROPERTY_ACTIVE = "active"
PROPERTY_INACTIVE = "inactive"
PROPERTY_STATUSES = (PROPERTY_ACTIVE, PROPERTY_INACTIVE)


class Property(db.Model):
    __tablename__ = "properties"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.Text, nullable=False)
    property_type = db.Column(db.String(20), nullable=False)  # house, apartment
    status = db.Column(db.String(20), nullable=False, default=PROPERTY_ACTIVE)  # active, inactive

    # Flat asking rent; the lease carries the agreed rent
    monthly_rent = db.Column(db.Numeric(10, 2), nullable=True)

    owner_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tenants = db.relationship("Tenant", backref="property", lazy=True, cascade="all")
    leases = db.relationship("Lease", backref="property", lazy=True, cascade="all")
    maintenance_requests = db.relationship(
        "MaintenanceRequest", backref="property", lazy=True, cascade="all"
    )

    def __repr__(self):
        return f"<Property {self.id}: {self.name}>"

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "property_type": self.property_type,
            "status": self.status,
            "monthly_rent": money(self.monthly_rent),
            "owner_id": self.owner_id,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }
