"""Exposes the resource client classes."""

from .attachments_client import AttachmentsClient
from .audit_log_client import AuditLogClient
from .base_client import BaseResourceClient
from .books_client import BooksClient
from .chapters_client import ChaptersClient
from .content_permissions_client import ContentPermissionsClient
from .image_gallery_client import ImageGalleryClient
from .imports_client import ImportsClient
from .pages_client import PagesClient
from .recycle_bin_client import RecycleBinClient
from .search_client import SearchClient
from .shelves_client import ShelvesClient
from .system_client import DocsClient, SystemClient
from .users_client import RolesClient, UsersClient

__all__ = [
    "AttachmentsClient",
    "AuditLogClient",
    "BaseResourceClient",
    "BooksClient",
    "ChaptersClient",
    "ContentPermissionsClient",
    "DocsClient",
    "ImageGalleryClient",
    "ImportsClient",
    "PagesClient",
    "RecycleBinClient",
    "RolesClient",
    "SearchClient",
    "ShelvesClient",
    "SystemClient",
    "UsersClient",
]
