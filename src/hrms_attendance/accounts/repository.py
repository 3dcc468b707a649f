from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Account repository interface.

    Services depend on this Protocol, never on a concrete DB class.
    """

    def get_by_username(self, username: str) -> Optional[Account]:
        raise NotImplementedError
