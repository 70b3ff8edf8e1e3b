"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    AGE = "age"
    EMAIL = "email"
    IS_ADMIN = "is_admin"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
