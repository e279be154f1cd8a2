"""Pydantic models for BookStack API entities, request arguments and responses."""

from .attachments import (
    AttachmentItem,
    AttachmentLink,
    CreateAttachmentArgs,
    CreateLinkAttachmentArgs,
    ListAttachmentsResult,
    ReadAttachmentResult,
    UpdateAttachmentArgs,
    UpdateLinkAttachmentArgs,
)
from .audit_log import AuditLogItem, ListAuditLogResult
from .base import (
    AmbiguousDateTime,
    ApiModel,
    ArgsModel,
    ContentTag,
    ListResult,
    Tag,
    User,
    form_fields,
)
from .books import (
    BOOK_CONTENTS,
    BookContent,
    BookContentChapter,
    BookContentPage,
    BookCover,
    BookCoverSummary,
    BookCoverThumbs,
    BookItem,
    BookSummary,
    CreateBookArgs,
    ListBooksResult,
    ReadBookResult,
    UpdateBookArgs,
)
from .chapters import (
    ChapterContentPage,
    ChapterItem,
    ChapterSummary,
    CreateChapterArgs,
    ListChaptersResult,
    ReadChapterResult,
    UpdateChapterArgs,
)
from .images import (
    CreateImageArgs,
    ImageItem,
    ImageRef,
    ImageSummary,
    ImageThumbs,
    ListImagesResult,
    UpdateImageArgs,
)
from .imports import (
    ImportsAttachment,
    ImportsChapterDetails,
    ImportsContentDetails,
    ImportsImage,
    ImportsItem,
    ImportsItemDetails,
    ImportsPageDetails,
    ImportsSummary,
    ImportsTag,
    ListImportsResult,
    RunImportsArgs,
    RunImportsResult,
)
from .pages import (
    CreatePageArgs,
    ListPagesResult,
    PageItem,
    PageSummary,
    ReadPageResult,
    UpdatePageArgs,
)
from .permissions import (
    ContentPermissionsItem,
    FallbackPermission,
    RolePermission,
    RolePermissionEx,
    RoleShort,
    UpdateContentPermissionsArgs,
)
from .recycle_bin import (
    DELETABLE_CONTENTS,
    DELETABLE_PARENTS,
    DeletableContent,
    DeletableContentBook,
    DeletableContentChapter,
    DeletableContentPage,
    DeletableContentParent,
    DeletableContentParentBook,
    DeletableContentParentChapter,
    DeletableContentShelf,
    ListRecycleBinResult,
    RecycleItem,
    RestoreRecycleItemResult,
)
from .search import (
    SEARCH_CONTENTS,
    SearchContent,
    SearchContentBook,
    SearchContentChapter,
    SearchContentEnvelope,
    SearchContentPage,
    SearchContentPreview,
    SearchContentShelf,
    SearchResult,
)
from .shelves import (
    CreateShelfArgs,
    ListShelvesResult,
    ReadShelfResult,
    ShelfContentBook,
    ShelfCover,
    ShelfCoverSummary,
    ShelfItem,
    ShelfSummary,
    UpdateShelfArgs,
)
from .system import ApiDoc, ApiDocResult, SystemInfo
from .users import (
    CreateRoleArgs,
    CreateUserArgs,
    ListRolesResult,
    ListUsersResult,
    RoleItem,
    RoleSummary,
    UpdateRoleArgs,
    UpdateUserArgs,
    UserItem,
    UserRole,
    UserSummary,
)

__all__ = [
    "AmbiguousDateTime",
    "ApiDoc",
    "ApiDocResult",
    "ApiModel",
    "ArgsModel",
    "AttachmentItem",
    "AttachmentLink",
    "AuditLogItem",
    "BOOK_CONTENTS",
    "BookContent",
    "BookContentChapter",
    "BookContentPage",
    "BookCover",
    "BookCoverSummary",
    "BookCoverThumbs",
    "BookItem",
    "BookSummary",
    "ChapterContentPage",
    "ChapterItem",
    "ChapterSummary",
    "ContentPermissionsItem",
    "ContentTag",
    "CreateAttachmentArgs",
    "CreateBookArgs",
    "CreateChapterArgs",
    "CreateImageArgs",
    "CreateLinkAttachmentArgs",
    "CreatePageArgs",
    "CreateRoleArgs",
    "CreateShelfArgs",
    "CreateUserArgs",
    "DELETABLE_CONTENTS",
    "DELETABLE_PARENTS",
    "DeletableContent",
    "DeletableContentBook",
    "DeletableContentChapter",
    "DeletableContentPage",
    "DeletableContentParent",
    "DeletableContentParentBook",
    "DeletableContentParentChapter",
    "DeletableContentShelf",
    "FallbackPermission",
    "ImageItem",
    "ImageRef",
    "ImageSummary",
    "ImageThumbs",
    "ImportsAttachment",
    "ImportsChapterDetails",
    "ImportsContentDetails",
    "ImportsImage",
    "ImportsItem",
    "ImportsItemDetails",
    "ImportsPageDetails",
    "ImportsSummary",
    "ImportsTag",
    "ListAttachmentsResult",
    "ListAuditLogResult",
    "ListBooksResult",
    "ListChaptersResult",
    "ListImagesResult",
    "ListImportsResult",
    "ListPagesResult",
    "ListRecycleBinResult",
    "ListResult",
    "ListRolesResult",
    "ListShelvesResult",
    "ListUsersResult",
    "PageItem",
    "PageSummary",
    "ReadAttachmentResult",
    "ReadBookResult",
    "ReadChapterResult",
    "ReadPageResult",
    "ReadShelfResult",
    "RecycleItem",
    "RestoreRecycleItemResult",
    "RoleItem",
    "RolePermission",
    "RolePermissionEx",
    "RoleShort",
    "RoleSummary",
    "RunImportsArgs",
    "RunImportsResult",
    "SEARCH_CONTENTS",
    "SearchContent",
    "SearchContentBook",
    "SearchContentChapter",
    "SearchContentEnvelope",
    "SearchContentPage",
    "SearchContentPreview",
    "SearchContentShelf",
    "SearchResult",
    "ShelfContentBook",
    "ShelfCover",
    "ShelfCoverSummary",
    "ShelfItem",
    "ShelfSummary",
    "SystemInfo",
    "Tag",
    "UpdateAttachmentArgs",
    "UpdateBookArgs",
    "UpdateChapterArgs",
    "UpdateContentPermissionsArgs",
    "UpdateImageArgs",
    "UpdateLinkAttachmentArgs",
    "UpdatePageArgs",
    "UpdateRoleArgs",
    "UpdateShelfArgs",
    "UpdateUserArgs",
    "User",
    "UserItem",
    "UserRole",
    "UserSummary",
    "form_fields",
]
