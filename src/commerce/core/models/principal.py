"""Authenticated caller model."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Role(StrEnum):
    ADMIN = "admin"
    SELLER = "seller"
    DELIVERY = "delivery"
    CUSTOMER = "customer"


class Principal(BaseModel):
    """Identity extracted from a verified bearer token."""

    subject: str = Field(description="Token subject: the user id")
    roles: list[Role] = Field(default_factory=list)
    name: str | None = None
    issuer: str = ""
    expires_at: int | None = None

    def has_role(self, *roles: Role) -> bool:
        return any(role in self.roles for role in roles)
