"""Dependency injection singletons for Hintline.

The notification dispatcher is not a singleton: each app instance owns one
(``app.state.dispatcher``) and passes it into the services that push.
"""

from hintline.access.policy import AccessPolicy
from hintline.audit.service import AuditRecorder
from hintline.common.config import get_settings
from hintline.common.database import DatabaseManager
from hintline.hints.service import HintService
from hintline.notifications.dispatcher import NotificationDispatcher
from hintline.progress.service import ProgressService
from hintline.support.store import SupportRecordStore

_db: DatabaseManager | None = None
_store: SupportRecordStore | None = None
_audit: AuditRecorder | None = None
_policy: AccessPolicy | None = None
_progress: ProgressService | None = None


def get_db() -> DatabaseManager:
    global _db
    if _db is None:
        _db = DatabaseManager(get_settings())
    return _db


def get_store() -> SupportRecordStore:
    global _store
    if _store is None:
        _store = SupportRecordStore()
    return _store


def get_audit_recorder() -> AuditRecorder:
    global _audit
    if _audit is None:
        _audit = AuditRecorder()
    return _audit


def get_access_policy() -> AccessPolicy:
    global _policy
    if _policy is None:
        _policy = AccessPolicy()
    return _policy


def get_progress_service() -> ProgressService:
    global _progress
    if _progress is None:
        _progress = ProgressService(
            get_store(),
            audit=get_audit_recorder(),
            policy=get_access_policy(),
        )
    return _progress


def get_hint_service(dispatcher: NotificationDispatcher) -> HintService:
    return HintService(
        get_store(),
        audit=get_audit_recorder(),
        policy=get_access_policy(),
        dispatcher=dispatcher,
    )


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _db, _store, _audit, _policy, _progress
    _db = None
    _store = None
    _audit = None
    _policy = None
    _progress = None
