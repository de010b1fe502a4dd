from datetime import datetime

from ..extensions import db
from ..utils import iso, money

LEASE_ACTIVE = "active"
LEASE_EXPIRED = "expired"
LEASE_TERMINATED = "terminated"
LEASE_STATUSES = (LEASE_ACTIVE, LEASE_EXPIRED, LEASE_TERMINATED)


class Lease(db.Model):
    __tablename__ = "leases"
    __table_args__ = (
        # At most one active lease per property, enforced by the database
        db.Index(
            "uq_leases_one_active_per_property",
            "property_id",
            unique=True,
            sqlite_where=db.text("status = 'active'"),
            postgresql_where=db.text("status = 'active'"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    property_id = db.Column(db.Integer, db.ForeignKey("properties.id"), nullable=False, index=True)
    tenant_id = db.Column(db.Integer, db.ForeignKey("tenants.id"), nullable=False, index=True)

    # Lease Terms (end date is the last rentable day)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False, index=True)
    monthly_rent = db.Column(db.Numeric(10, 2), nullable=False)

    status = db.Column(db.String(20), nullable=False, default=LEASE_ACTIVE)  # active, expired, terminated
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Lease {self.id}: {self.start_date} to {self.end_date} ({self.status})>"

    def serialize(self):
        return {
            "id": self.id,
            "property_id": self.property_id,
            "tenant_id": self.tenant_id,
            "start_date": iso(self.start_date),
            "end_date": iso(self.end_date),
            "monthly_rent": money(self.monthly_rent),
            "status": self.status,
            "notes": self.notes,
            "property_name": self.property.name if self.property else None,
            "tenant_name": self.tenant.name if self.tenant else None,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }
