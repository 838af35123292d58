"""User record and its public view.

A User is created once at registration and never changes afterwards.
Only PublicUser ever leaves the service (responses, session payloads).
"""

from dataclasses import asdict, dataclass
from typing import Any
from uuid import uuid4


def generate_user_id() -> str:
    """Generate unique user ID."""
    return str(uuid4())


@dataclass(frozen=True)
class User:
    """Registered user as held by the record store."""

    id: str
    name: str
    email: str | None
    phone: str | None
    password_hash: str

    def to_public(self) -> "PublicUser":
        """Strip secret fields."""
        return PublicUser(id=self.id, name=self.name, email=self.email, phone=self.phone)


@dataclass(frozen=True)
class PublicUser:
    """User without credentials."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PublicUser":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data.get("email"),
            phone=data.get("phone"),
        )
