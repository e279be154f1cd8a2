"""Constants used throughout the shelfloom library.

This module defines default client settings, the header names used by the
BookStack rate limiter, and the names of the system role permissions.
"""

from enum import Enum

__version__ = "0.1.0"

DEFAULT_USER_AGENT: str = f"shelfloom/{__version__}"
DEFAULT_TIMEOUT: float = 30.0
DEFAULT_BATCH_SIZE: int = 500  # Page size used when enumerating whole collections

# Extra delay added on top of the server-mandated cool-down before retrying.
RATE_LIMIT_SAFETY_MARGIN: float = 0.1

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RETRY_AFTER_HEADER = "Retry-After"


class ContentType(str, Enum):
    """Content kinds accepted by the content-permissions endpoints."""

    SHELF = "bookshelf"
    BOOK = "book"
    CHAPTER = "chapter"
    PAGE = "page"


class ImageType(str, Enum):
    """Gallery image kinds accepted when uploading an image."""

    GALLERY = "gallery"
    DRAWIO = "drawio"


class RolePermissions:
    """Names of the system permissions that can be granted to a role."""

    MANAGE_SETTINGS = "settings-manage"
    MANAGE_USERS = "users-manage"
    MANAGE_ROLES_AND_PERMISSIONS = "user-roles-manage"
    MANAGE_ALL_ENTITY_PERMISSIONS = "restrictions-manage-all"
    MANAGE_ENTITY_PERMISSIONS_ON_OWN_CONTENT = "restrictions-manage-own"
    CREATE_ALL_BOOKS = "book-create-all"
    CREATE_OWN_BOOKS = "book-create-own"
    UPDATE_ALL_BOOKS = "book-update-all"
    UPDATE_OWN_BOOKS = "book-update-own"
    DELETE_ALL_BOOKS = "book-delete-all"
    DELETE_OWN_BOOKS = "book-delete-own"
    CREATE_ALL_PAGES = "page-create-all"
    CREATE_OWN_PAGES = "page-create-own"
    UPDATE_ALL_PAGES = "page-update-all"
    UPDATE_OWN_PAGES = "page-update-own"
    DELETE_ALL_PAGES = "page-delete-all"
    DELETE_OWN_PAGES = "page-delete-own"
    CREATE_ALL_CHAPTERS = "chapter-create-all"
    CREATE_OWN_CHAPTERS = "chapter-create-own"
    UPDATE_ALL_CHAPTERS = "chapter-update-all"
    UPDATE_OWN_CHAPTERS = "chapter-update-own"
    DELETE_ALL_CHAPTERS = "chapter-delete-all"
    DELETE_OWN_CHAPTERS = "chapter-delete-own"
    CREATE_ALL_IMAGES = "image-create-all"
    CREATE_OWN_IMAGES = "image-create-own"
    UPDATE_ALL_IMAGES = "image-update-all"
    UPDATE_OWN_IMAGES = "image-update-own"
    DELETE_ALL_IMAGES = "image-delete-all"
    DELETE_OWN_IMAGES = "image-delete-own"
    VIEW_ALL_BOOKS = "book-view-all"
    VIEW_OWN_BOOKS = "book-view-own"
    VIEW_ALL_PAGES = "page-view-all"
    VIEW_OWN_PAGES = "page-view-own"
    VIEW_ALL_CHAPTERS = "chapter-view-all"
    VIEW_OWN_CHAPTERS = "chapter-view-own"
    CREATE_ALL_ATTACHMENTS = "attachment-create-all"
    CREATE_OWN_ATTACHMENTS = "attachment-create-own"
    UPDATE_ALL_ATTACHMENTS = "attachment-update-all"
    UPDATE_OWN_ATTACHMENTS = "attachment-update-own"
    DELETE_ALL_ATTACHMENTS = "attachment-delete-all"
    DELETE_OWN_ATTACHMENTS = "attachment-delete-own"
    CREATE_ALL_COMMENTS = "comment-create-all"
    CREATE_OWN_COMMENTS = "comment-create-own"
    UPDATE_ALL_COMMENTS = "comment-update-all"
    UPDATE_OWN_COMMENTS = "comment-update-own"
    DELETE_ALL_COMMENTS = "comment-delete-all"
    DELETE_OWN_COMMENTS = "comment-delete-own"
    VIEW_ALL_SHELVES = "bookshelf-view-all"
    VIEW_OWN_SHELVES = "bookshelf-view-own"
    CREATE_ALL_SHELVES = "bookshelf-create-all"
    CREATE_OWN_SHELVES = "bookshelf-create-own"
    UPDATE_ALL_SHELVES = "bookshelf-update-all"
    UPDATE_OWN_SHELVES = "bookshelf-update-own"
    DELETE_ALL_SHELVES = "bookshelf-delete-all"
    DELETE_OWN_SHELVES = "bookshelf-delete-own"
    MANAGE_PAGE_TEMPLATES = "templates-manage"
    ACCESS_SYSTEM_API = "access-api"
    EXPORT_CONTENT = "content-export"
    CHANGE_PAGE_EDITOR = "editor-change"
