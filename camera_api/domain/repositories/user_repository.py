from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.
    
    Implementations raise ConflictError on a username/email uniqueness
    violation and StorageError on any other backend failure.
    """
    
    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username (case-sensitive)"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """List all users ordered by ID"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update); assigns the ID on insert"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete user by ID (no-op when absent)"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored users"""
        pass
