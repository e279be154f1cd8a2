"""Client for the BookStack audit log endpoint."""

from ..endpoints import AUDIT_LOG
from ..models import ListAuditLogResult
from .base_client import BaseResourceClient, ListableMixin


class AuditLogClient(ListableMixin, BaseResourceClient):
    """Read-only client for the system audit log.

    Requires both the ``settings-manage`` and ``users-manage`` permissions.
    """

    _entity_path: str = AUDIT_LOG
    _list_model = ListAuditLogResult
