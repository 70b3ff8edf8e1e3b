# Standard library imports
import logging
from typing import Any, Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import FieldValidationError, PersistenceError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse a string ID into an ObjectId, returning None when malformed"""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_all(self) -> List[User]:
        """
        Find all users
        
        Returns:
            List of User domain models in natural store order
        """
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError(f"Error listing users: {e}") from e
        return self._documents_to_users(documents)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding user by ID: {e}") from e
        
        if document is None:
            return None
        return self._load_user(document)
    
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """
        Find users by a collection of IDs
        
        Args:
            user_ids: User IDs to look up; malformed or unknown IDs are skipped
            
        Returns:
            List of the User domain models that exist
        """
        object_ids = {oid for oid in (to_object_id(user_id) for user_id in user_ids) if oid is not None}
        if not object_ids:
            return []
        
        try:
            documents = await self.user_collection.find(
                {UserFields.MONGO_ID: {"$in": list(object_ids)}}
            ).to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError(f"Error finding users by ID: {e}") from e
        return self._documents_to_users(documents)
    
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
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding user by email: {e}") from e
        
        if document is None:
            return None
        return self._load_user(document)
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            FieldValidationError: If the email is already taken (unique index)
            PersistenceError: If the store rejects the operation
        """
        if not user:
            raise ValueError("User cannot be None")
        
        user_dict = self._user_to_dict(user)
        
        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")
                
                await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                )
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise PersistenceError(f"User {user.id} was updated but could not be retrieved")
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
                if document is None:
                    raise PersistenceError("User was created but could not be retrieved")
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate email rejected by store: {user.email}")
            raise FieldValidationError(["Email already exists"], entity="User") from e
        except PyMongoError as e:
            raise PersistenceError(f"Error saving user: {e}") from e
        except (OverflowError, InvalidDocument) as e:
            raise PersistenceError(f"User could not be encoded for storage: {e}") from e

        return self._document_to_user(document)
    
    async def delete(self, user_id: str) -> bool:
        """
        Delete user by ID. Posts referencing the user are left in place.
        
        Args:
            user_id: User ID to delete
            
        Returns:
            True if a document was removed
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return False
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting user: {e}") from e
        return result.deleted_count > 0
    
    def _load_user(self, document: Dict[str, Any]) -> Optional[User]:
        """
        Convert a stored document, skipping it if it fails current validation

        Documents written under older rules (e.g. a fractional age) are
        logged and treated as absent so one bad record cannot break reads.
        """
        try:
            return self._document_to_user(document)
        except FieldValidationError as e:
            logger.warning(f"Skipping stored user {document.get(UserFields.MONGO_ID)}: {e.errors}")
            return None

    def _documents_to_users(self, documents: List[Dict[str, Any]]) -> List[User]:
        users = (self._load_user(document) for document in documents)
        return [user for user in users if user is not None]

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            age=document.get(UserFields.AGE),
            email=document.get(UserFields.EMAIL, ""),
            is_admin=document.get(UserFields.IS_ADMIN, False),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document (without _id)
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.AGE: user.age,
            UserFields.EMAIL: user.email,
            UserFields.IS_ADMIN: user.is_admin,
        }
