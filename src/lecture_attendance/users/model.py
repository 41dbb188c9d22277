from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credential:
    """Domain entity: a login identity.

    Plain data object, no DB access code lives here.
    """

    user_id: int
    username: str
    password_hash: str
