# symphony/portal/core/auth/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class SessionUser:
    subject: str | None = None
    username: str | None = None
    claims: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Session:
    """Current user context. Read-only; never persisted by the portal."""

    access_token: str | None = None
    user: SessionUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)
