# Standard library imports
from typing import List, Optional

# External package imports
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from ...domain.exceptions import NotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from .errors import storage_errors
from .orm_models import UserRecord


def _user_conflict_message(error: IntegrityError) -> str:
    detail = str(error.orig).lower()
    if "username" in detail:
        return "Username already exists"
    if "email" in detail:
        return "Email already exists"
    return "User already exists"


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository"""
    
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
    
    async def _find_one(self, action: str, **criteria) -> Optional[User]:
        with storage_errors(action):
            async with self.session_factory() as session:
                record = (
                    await session.scalars(select(UserRecord).filter_by(**criteria))
                ).one_or_none()
                return self._record_to_user(record) if record is not None else None
    
    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username
        
        Args:
            username: Username to search for (case-sensitive)
            
        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None
        return await self._find_one("finding user by username", username=username)
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._find_one("finding user by email", email=email)
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        return await self._find_one("finding user by ID", id=user_id)
    
    async def find_all(self) -> List[User]:
        with storage_errors("listing users"):
            async with self.session_factory() as session:
                records = await session.scalars(select(UserRecord).order_by(UserRecord.id))
                return [self._record_to_user(record) for record in records]
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            ConflictError: On a username or email uniqueness violation
            NotFoundError: If updating an ID that does not exist
        """
        with storage_errors("saving user", _user_conflict_message):
            async with self.session_factory.begin() as session:
                if user.id is None:
                    record = UserRecord()
                    session.add(record)
                else:
                    record = await session.get(UserRecord, user.id)
                    if record is None:
                        raise NotFoundError(f"User not found with id: {user.id}")
                self._apply_user(record, user)
                await session.flush()
                return self._record_to_user(record)
    
    async def delete(self, user_id: int) -> None:
        with storage_errors("deleting user"):
            async with self.session_factory.begin() as session:
                await session.execute(delete(UserRecord).where(UserRecord.id == user_id))
    
    async def count(self) -> int:
        with storage_errors("counting users"):
            async with self.session_factory() as session:
                return await session.scalar(select(func.count()).select_from(UserRecord)) or 0
    
    @staticmethod
    def _apply_user(record: UserRecord, user: User) -> None:
        record.username = user.username
        record.email = user.email
        record.name = user.name
        record.photo = user.photo
        record.hashed_password = user.hashed_password
        record.disabled = user.disabled
    
    @staticmethod
    def _record_to_user(record: UserRecord) -> User:
        return User(
            id=record.id,
            username=record.username,
            email=record.email,
            hashed_password=record.hashed_password,
            name=record.name,
            photo=record.photo,
            disabled=bool(record.disabled),
        )
