"""
Zero Waste Chef User Models
Database models for registered identities and their pantry
"""

from sqlalchemy import Integer, String, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum as PyEnum
from typing import Optional

from core.database import Base


class UserRole(PyEnum):
    """Account roles; only administrators may moderate content"""
    STANDARD = "user"
    ADMINISTRATOR = "admin"


class User(Base):
    """Registered identity with credentials and profile"""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)

    # Profile information
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    family_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    profession: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            native_enum=False,
            length=20,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        default=UserRole.STANDARD,
        server_default=UserRole.STANDARD.value,
        nullable=False,
    )

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role.value})>"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMINISTRATOR


class Ingredient(Base):
    """Pantry item owned by a single user"""
    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    expiration_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    def __repr__(self):
        return f"<Ingredient(id={self.id}, user_id={self.user_id}, name={self.name})>"
