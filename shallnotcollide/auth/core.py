# shallnotcollide/auth/core.py
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

ROLES = ('controller', 'supervisor')

@dataclass(frozen=True)
class User:
    username: str
    password_hash: str
    role: str

    def to_public_dict(self) -> Dict[str, str]:
        return {"username": self.username, "role": self.role}

class UserStore:
    """In-memory credential store for the console login."""

    def __init__(self):
        self._users: Dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def add(self, username: str, password: str, role: str = 'controller') -> User:
        if role not in ROLES:
            raise ValueError(f"Unknown role '{role}'. Expected one of {ROLES}")
        user = User(username=username, password_hash=generate_password_hash(password), role=role)
        self._users[username] = user
        return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Returns the user on matching credentials, otherwise None."""
        user = self._users.get(username)
        if user is None or not check_password_hash(user.password_hash, password):
            logger.warning(f"Failed login attempt for '{username}'")
            return None
        return user

def default_store() -> UserStore:
    """Demo accounts for a local console."""
    store = UserStore()
    store.add('controller', 'controller123', role='controller')
    store.add('supervisor', 'supervisor123', role='supervisor')
    return store
