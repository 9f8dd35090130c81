# Standard library imports
import asyncio
import dataclasses
from typing import Dict, List, Optional

# Local application imports
from ...domain.exceptions import ConflictError, NotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User


class InMemoryUserRepository(UserRepository):
    """
    Process-local implementation of UserRepository.
    
    Enforces the same username/email uniqueness as the SQL schema. Users are
    copied on the way in and out so callers never mutate stored state.
    """
    
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
    
    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return dataclasses.replace(user)
        return None
    
    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return dataclasses.replace(user)
        return None
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return dataclasses.replace(user) if user is not None else None
    
    async def find_all(self) -> List[User]:
        return [dataclasses.replace(self._users[key]) for key in sorted(self._users)]
    
    async def save(self, user: User) -> User:
        async with self._lock:
            if user.id is not None and user.id not in self._users:
                raise NotFoundError(f"User not found with id: {user.id}")
            for other in self._users.values():
                if other.id == user.id:
                    continue
                if other.username == user.username:
                    raise ConflictError("Username already exists")
                if other.email == user.email:
                    raise ConflictError("Email already exists")
            
            stored = dataclasses.replace(user)
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            self._users[stored.id] = stored
            return dataclasses.replace(stored)
    
    async def delete(self, user_id: int) -> None:
        async with self._lock:
            self._users.pop(user_id, None)
    
    async def count(self) -> int:
        return len(self._users)
