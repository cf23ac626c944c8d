"""User model definitions."""

import logging

from sqlalchemy import Column, DateTime, Integer, LargeBinary, String, func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, validates

from backend.auth.passwords import BCRYPT_HASH_LENGTH, check_password, hash_password
from backend.core.errors import ValidationError
from backend.database import Base
from backend.models.validators import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH, validate_signup
from backend.schemas.user import PublicUser, SafeUser, UserView

logger = logging.getLogger(__name__)


class User(Base):
    """Represents a registered account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, index=True, nullable=False)
    hashed_password = Column(LargeBinary(BCRYPT_HASH_LENGTH), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"

    @validates("hashed_password")
    def _validate_hashed_password(self, key, value):
        if value is None or len(value) != BCRYPT_HASH_LENGTH:
            raise ValueError(f"{key} must be exactly {BCRYPT_HASH_LENGTH} bytes.")
        return value

    def to_safe_object(self) -> SafeUser:
        return SafeUser.model_validate(self)

    def to_public_object(self) -> PublicUser:
        return PublicUser.model_validate(self)

    def project(self, view: UserView) -> SafeUser | PublicUser:
        if view == UserView.PUBLIC:
            return self.to_public_object()
        return self.to_safe_object()

    def validate_password(self, password: str) -> bool:
        return check_password(password, self.hashed_password)

    @classmethod
    def get_current_user_by_id(
        cls,
        db: Session,
        user_id: int,
        view: UserView = UserView.OWNER,
    ) -> SafeUser | PublicUser | None:
        user = db.get(cls, user_id)
        if user is None:
            return None
        return user.project(view)

    @classmethod
    def login(cls, db: Session, credential: str, password: str) -> SafeUser | None:
        """Return the owner view for a matching credential and password, else None.

        ``credential`` is compared against both username and email. An unknown
        credential and a wrong password give the same result.
        """
        user = (
            db.query(cls)
            .filter(or_(cls.username == credential, cls.email == credential))
            .first()
        )
        if user is None or not user.validate_password(password):
            logger.info("Login rejected.")
            return None

        logger.info("User %s logged in.", user.id)
        return user.to_safe_object()

    @classmethod
    def signup(cls, db: Session, username: str, email: str, password: str) -> SafeUser:
        errors = validate_signup(username, email, password)
        if not errors:
            errors = cls._uniqueness_errors(db, username, email)
        if errors:
            logger.info("Signup rejected for fields: %s", ", ".join(sorted(errors)))
            raise ValidationError(errors)

        user = cls(username=username, email=email, hashed_password=hash_password(password))
        db.add(user)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            errors = cls._uniqueness_errors(db, username, email) or {
                "credential": "Username or email already exists.",
            }
            logger.info("Signup lost a uniqueness race for fields: %s", ", ".join(sorted(errors)))
            raise ValidationError(errors) from exc

        # created_at/updated_at are filled in by the database.
        db.refresh(user)
        logger.info("User %s signed up.", user.id)
        return user.to_safe_object()

    @classmethod
    def _uniqueness_errors(cls, db: Session, username: str, email: str) -> dict[str, str]:
        errors = {}
        if db.query(cls.id).filter(cls.username == username).first() is not None:
            errors["username"] = "Username already exists."
        if db.query(cls.id).filter(cls.email == email).first() is not None:
            errors["email"] = "Email already exists."
        return errors
