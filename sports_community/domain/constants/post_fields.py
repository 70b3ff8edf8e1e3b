"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    USER = "user"  # Reference to the owning user's _id
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
