from datetime import datetime

from ..extensions import db
from ..utils import iso, money

TENANT_ACTIVE = "active"
TENANT_STATUSES = (TENANT_ACTIVE, "inactive", "evicted")
PAYMENT_METHODS = ("cash", "bank", "mobile_money")


class Tenant(db.Model):
    __tablename__ = "tenants"

    id = db.Column(db.Integer, primary_key=True)

    # Personal Information
    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(100), nullable=True)
    address = db.Column(db.Text, nullable=True)
    id_number = db.Column(db.String(16), nullable=True)  # national ID, 16 digits

    status = db.Column(db.String(20), nullable=False, default=TENANT_ACTIVE)  # active, inactive, evicted

    # Payment tracking
    payment = db.Column(db.Numeric(10, 2), nullable=True)
    payment_date = db.Column(db.Date, nullable=True)
    payment_method = db.Column(db.String(20), nullable=True)  # cash, bank, mobile_money
    months_paid = db.Column(db.Integer, nullable=False, default=0)
    stay_start_date = db.Column(db.Date, nullable=True)
    stay_end_date = db.Column(db.Date, nullable=True)
    total_amount = db.Column(db.Numeric(10, 2), nullable=True)

    property_id = db.Column(db.Integer, db.ForeignKey("properties.id"), nullable=False, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    leases = db.relationship("Lease", backref="tenant", lazy=True, cascade="all")

    def __repr__(self):
        return f"<Tenant {self.id}: {self.name}>"

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "id_number": self.id_number,
            "status": self.status,
            "payment": money(self.payment),
            "payment_date": iso(self.payment_date),
            "payment_method": self.payment_method,
            "months_paid": self.months_paid,
            "stay_start_date": iso(self.stay_start_date),
            "stay_end_date": iso(self.stay_end_date),
            "total_amount": money(self.total_amount),
            "property_id": self.property_id,
            "property_name": self.property.name if self.property else None,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }
