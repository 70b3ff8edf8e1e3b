from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users in store order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Find every user whose ID is in user_ids, skipping unknown IDs"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID, returning whether a record was removed"""
        pass
