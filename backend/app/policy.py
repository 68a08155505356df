from typing import Protocol

ADMIN_ROLE = "admin"


class Actor(Protocol):
    id: int
    role: str


def can_modify(actor: Actor, owner_id: int) -> bool:
    """Owner-or-admin rule gating question update and delete."""
    return actor.id == owner_id or actor.role == ADMIN_ROLE


def is_admin(actor: Actor) -> bool:
    return actor.role == ADMIN_ROLE
