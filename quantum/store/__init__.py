"""In-memory workspace state and the helpers that project it into trees."""

from .ids import new_id
from .manager import WorkspaceStore, TEMPLATE_CATALOG
from .notifications import NotificationQueue
from .scheduling import AsyncioScheduler, ManualScheduler, Scheduler
from . import tree

__all__ = [
    "new_id",
    "WorkspaceStore",
    "TEMPLATE_CATALOG",
    "NotificationQueue",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "tree"
]
