import logging

from ..errors import DuplicateRecord, NotFound, Unauthorized, ValidationError
from ..models import User
from ..models.user import ROLE_ADMIN, ROLE_OWNER
from ..validation import OWNER_FIELDS, OWNER_REQUIRED, PASSWORD_MIN_LENGTH, PHONE_RE, parse_payload
from .base import commit

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, session):
        self.session = session

    def login(self, data):
        """Return the user for a phone/password pair, or raise Unauthorized."""
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        phone = (data.get("phone") or "").strip()
        password = data.get("password") or ""
        if not phone or not password:
            raise ValidationError("phone and password are required")

        user = self.session.query(User).filter_by(phone=phone).first()
        if user is None or not user.check_password(password):
            logger.info("Failed login for phone %s", phone)
            raise Unauthorized("Invalid credentials")
        return user

    def profile(self, user_id):
        user = self.session.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def register_owner(self, data):
        fields = parse_payload(data, OWNER_FIELDS, OWNER_REQUIRED)
        if len(fields["password"]) < PASSWORD_MIN_LENGTH:
            raise ValidationError(f"password must be at least {PASSWORD_MIN_LENGTH} characters")

        user = User(name=fields["name"], phone=fields["phone"], role=ROLE_OWNER)
        user.set_password(fields["password"])
        self.session.add(user)
        commit(self.session, integrity_error=DuplicateRecord("Phone number is already registered"))
        logger.info("Registered owner %s", user.id)
        return user

    def seed_admin(self, phone, password, name="Administrator"):
        """Create the admin account, or reset its password and role if it exists.

        Returns (user, created).
        """
        if not phone or not PHONE_RE.match(phone):
            raise ValidationError("SU_PHONE must be a valid phone number")
        if not password or len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(f"SU_PASSWORD must be at least {PASSWORD_MIN_LENGTH} characters")

        user = self.session.query(User).filter_by(phone=phone).first()
        created = user is None
        if created:
            user = User(name=name, phone=phone)
            self.session.add(user)
        user.role = ROLE_ADMIN
        user.set_password(password)
        commit(self.session)
        return user, created
