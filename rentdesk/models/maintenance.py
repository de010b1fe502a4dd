from datetime import datetime

from ..extensions import db
from ..utils import iso, money

MAINTENANCE_STATUSES = ("pending", "in_progress", "completed", "cancelled")
MAINTENANCE_PRIORITIES = ("low", "medium", "high", "urgent")


class MaintenanceRequest(db.Model):
    __tablename__ = "maintenance_requests"

    id = db.Column(db.Integer, primary_key=True)

    # Request Information
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(32), nullable=False, default="pending")  # pending, in_progress, completed, cancelled
    priority = db.Column(db.String(20), nullable=False, default="medium")  # low, medium, high, urgent

    property_id = db.Column(db.Integer, db.ForeignKey("properties.id"), nullable=False, index=True)

    # Scheduling and cost
    cost = db.Column(db.Numeric(10, 2), nullable=True)
    scheduled_date = db.Column(db.Date, nullable=True)
    completed_date = db.Column(db.Date, nullable=True)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<MaintenanceRequest {self.id}: {self.title} - {self.status}>"

    def serialize(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "property_id": self.property_id,
            "property_name": self.property.name if self.property else None,
            "cost": money(self.cost),
            "scheduled_date": iso(self.scheduled_date),
            "completed_date": iso(self.completed_date),
            "notes": self.notes,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }
