# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...domain.exceptions import FieldValidationError, PersistenceError
from .mongo_connection import get_post_collection
from .mongo_user_repository import to_object_id

logger = logging.getLogger(__name__)


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""
    
    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()
    
    async def find_all(self) -> List[Post]:
        """Find all posts in natural store order"""
        try:
            documents = await self.post_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError(f"Error listing posts: {e}") from e
        return self._documents_to_posts(documents)
    
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        object_id = to_object_id(post_id)
        if object_id is None:
            return None
        
        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding post by ID: {e}") from e
        
        if document is None:
            return None
        return self._load_post(document)
    
    async def save(self, post: Post) -> Post:
        """Save post (create new or update existing)"""
        if not post:
            raise ValueError("Post cannot be None")
        
        post_dict = self._post_to_dict(post)
        
        try:
            if post.id:
                object_id = to_object_id(post.id)
                if object_id is None:
                    raise ValueError(f"Invalid post ID format: {post.id}")
                
                await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": post_dict},
                )
                document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
                if document is None:
                    raise PersistenceError(f"Post {post.id} was updated but could not be retrieved")
            else:
                result = await self.post_collection.insert_one(post_dict)
                document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
                if document is None:
                    raise PersistenceError("Post was created but could not be retrieved")
        except PyMongoError as e:
            raise PersistenceError(f"Error saving post: {e}") from e
        except (OverflowError, InvalidDocument) as e:
            raise PersistenceError(f"Post could not be encoded for storage: {e}") from e
        
        return self._document_to_post(document)
    
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID"""
        object_id = to_object_id(post_id)
        if object_id is None:
            return False
        
        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting post: {e}") from e
        return result.deleted_count > 0
    
    def _load_post(self, document: Dict[str, Any]) -> Optional[Post]:
        """Convert a stored document, logging and skipping it if it is no longer valid"""
        try:
            return self._document_to_post(document)
        except FieldValidationError as e:
            logger.warning(f"Skipping stored post {document.get(PostFields.MONGO_ID)}: {e.errors}")
            return None
    
    def _documents_to_posts(self, documents: List[Dict[str, Any]]) -> List[Post]:
        posts = (self._load_post(document) for document in documents)
        return [post for post in posts if post is not None]
    
    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """Convert MongoDB document to Post domain model"""
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        user_ref = document.get(PostFields.USER)
        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            user_id=str(user_ref) if user_ref is not None else "",
        )
    
    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document (without _id).
        
        The owner reference is stored as an ObjectId when it parses as one,
        otherwise as the raw string so it still round-trips.
        """
        user_object_id = to_object_id(post.user_id)
        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.USER: user_object_id if user_object_id is not None else post.user_id,
        }
