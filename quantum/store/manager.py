"""
Workspace store for Quantum.

This module holds the in-memory model of a workspace: its pages, blocks,
templates, roadmap tasks, calendar events and notifications, together with
the selection and sidebar state. Every mutation goes through a method of
``WorkspaceStore``; each method builds the next version of the affected
collections and swaps it in as a single step, so no caller can observe a
half-applied change.

Operations that reference an unknown id are silent no-ops.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

from ..config import ConfigManager, config as default_config
from ..models import (
    Block, BlockType, CalendarEvent, Notification, Page, RoadmapTask,
    Template, TemplateType, Workspace
)
from .ids import new_id
from .notifications import NotificationQueue
from .scheduling import AsyncioScheduler, Scheduler
from .tree import BlockIndex, descendant_ids, visible_pages

if TYPE_CHECKING:
    from ..importers import BaseImporter


TEMPLATE_CATALOG: Tuple[Template, ...] = (
    Template(
        id="template-roadmap",
        name="Roadmap",
        icon="🗺️",
        description="Plan and track project milestones",
        type=TemplateType.ROADMAP
    ),
    Template(
        id="template-calendar",
        name="Calendar",
        icon="📅",
        description="Organize events and deadlines",
        type=TemplateType.CALENDAR
    ),
)

# Identity and parent/child linkage are owned by add_block and delete_block;
# partial updates never overwrite them
_IMMUTABLE_BLOCK_FIELDS = frozenset({"id", "page_id", "parent_block_id", "children"})


class WorkspaceStore:
    """
    Single owner of all workspace collections.

    Readers get copies of the collections, never the lists the store
    mutates, and the entities themselves are frozen models.
    """

    def __init__(
        self,
        workspace: Optional[Workspace] = None,
        pages: Optional[Sequence[Page]] = None,
        blocks: Optional[Sequence[Block]] = None,
        templates: Optional[Sequence[Template]] = None,
        selected_page_id: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        settings: Optional[ConfigManager] = None
    ):
        """
        Initialize the workspace store.

        Args:
            workspace: The workspace record (defaults to one named from config)
            pages: Initial pages in collection order
            blocks: Initial blocks in collection order
            templates: Template catalog (defaults to roadmap and calendar)
            selected_page_id: Page selected on start, if any
            scheduler: Runs delayed callbacks such as notification expiry
            settings: Configuration source (defaults to the global config)
        """
        self.settings = settings or default_config
        self._workspace = workspace or Workspace(id="workspace-1", name=self.settings.workspace_name)
        self._pages: List[Page] = list(pages or [])
        self._blocks: List[Block] = list(blocks or [])
        self._templates: Tuple[Template, ...] = tuple(templates if templates is not None else TEMPLATE_CATALOG)
        self._roadmap_tasks: List[RoadmapTask] = []
        self._calendar_events: List[CalendarEvent] = []
        self._notifications = NotificationQueue()
        self._scheduler: Scheduler = scheduler or AsyncioScheduler()
        self._selected_page_id = selected_page_id
        self._selected_template_id: Optional[str] = None
        self._is_sidebar_collapsed = False
        self._block_index: Optional[BlockIndex] = None

    @classmethod
    def from_importer(cls, importer: "BaseImporter", **kwargs: Any) -> "WorkspaceStore":
        """
        Build a store populated from an importer.

        Args:
            importer: Source of the initial workspace contents
            **kwargs: Extra constructor arguments (scheduler, settings)

        Returns:
            A populated WorkspaceStore
        """
        store = cls(
            workspace=importer.get_workspace(),
            pages=importer.get_pages(),
            blocks=importer.get_blocks(),
            templates=importer.get_templates(),
            selected_page_id=importer.get_selected_page_id(),
            **kwargs
        )
        logging.info(f"Loaded workspace '{store.workspace.name}' with {len(store.pages)} pages "
                     f"and {len(store.blocks)} blocks")
        return store

    # Read access

    @property
    def workspace(self) -> Workspace:
        return self._workspace

    @property
    def pages(self) -> List[Page]:
        return list(self._pages)

    @property
    def blocks(self) -> List[Block]:
        return list(self._blocks)

    @property
    def templates(self) -> List[Template]:
        return list(self._templates)

    @property
    def roadmap_tasks(self) -> List[RoadmapTask]:
        return list(self._roadmap_tasks)

    @property
    def calendar_events(self) -> List[CalendarEvent]:
        return list(self._calendar_events)

    @property
    def notifications(self) -> List[Notification]:
        return self._notifications.snapshot()

    @property
    def selected_page_id(self) -> Optional[str]:
        return self._selected_page_id

    @property
    def selected_template_id(self) -> Optional[str]:
        return self._selected_template_id

    @property
    def is_sidebar_collapsed(self) -> bool:
        return self._is_sidebar_collapsed

    @property
    def selected_page(self) -> Optional[Page]:
        """The selected page, or None when nothing (or a template) is selected."""
        return self.get_page(self._selected_page_id) if self._selected_page_id else None

    @property
    def selected_template(self) -> Optional[Template]:
        return self.get_template(self._selected_template_id) if self._selected_template_id else None

    def get_page(self, page_id: str) -> Optional[Page]:
        return next((page for page in self._pages if page.id == page_id), None)

    def get_block(self, block_id: str) -> Optional[Block]:
        return self._index().get(block_id)

    def get_template(self, template_id: str) -> Optional[Template]:
        return next((template for template in self._templates if template.id == template_id), None)

    def outline(self) -> List[Tuple[int, Page]]:
        """Visible ``(depth, page)`` pairs of the page tree, in sidebar order."""
        return list(visible_pages(self._pages))

    # Workspace and UI state

    def update_workspace_name(self, name: str) -> None:
        self._workspace = self._workspace.model_copy(update={"name": name})

    def toggle_sidebar(self) -> None:
        self._is_sidebar_collapsed = not self._is_sidebar_collapsed

    def select_page(self, page_id: str) -> None:
        self._selected_page_id = page_id
        self._selected_template_id = None

    def select_template(self, template_id: str) -> None:
        self._selected_template_id = template_id
        self._selected_page_id = None

    # Page operations

    def add_page(self, parent_id: Optional[str] = None) -> Page:
        """
        Create a new page, give it an empty text block and select it.

        Args:
            parent_id: Page to nest the new page under; root when omitted

        Returns:
            The created page
        """
        page = Page(
            id=new_id("page"),
            title=self.settings.default_page_title,
            parent_id=parent_id or None,
            created_at=datetime.now(),
            is_expanded=False,
            icon=self.settings.default_page_icon
        )

        pages = self._pages + [page]
        if parent_id:
            pages = [p.model_copy(update={"is_expanded": True}) if p.id == parent_id else p for p in pages]

        default_block = Block(id=new_id("block"), type=BlockType.TEXT, content="", page_id=page.id)

        self._pages = pages
        self._set_blocks(self._blocks + [default_block])
        self.select_page(page.id)

        logging.debug(f"Added page {page.id} under {parent_id or 'root'}")
        return page

    def update_page_title(self, page_id: str, title: str) -> None:
        self._replace_page(page_id, title=title)

    def update_page_icon(self, page_id: str, icon: Optional[str]) -> None:
        self._replace_page(page_id, icon=icon)

    def toggle_page_expansion(self, page_id: str) -> None:
        page = self.get_page(page_id)
        if page is not None:
            self._replace_page(page_id, is_expanded=not page.is_expanded)

    def delete_page(self, page_id: str) -> None:
        """
        Delete a page together with its whole subtree and their blocks.

        If the selected page is removed, selection falls back to the first
        remaining page, or to nothing when no pages remain.

        Args:
            page_id: Root of the subtree to delete
        """
        if self.get_page(page_id) is None:
            logging.debug(f"delete_page: unknown page {page_id}")
            return

        doomed = set(descendant_ids(self._pages, page_id))
        remaining_pages = [page for page in self._pages if page.id not in doomed]
        remaining_blocks = [block for block in self._blocks if block.page_id not in doomed]

        # Swap both collections in together
        self._pages = remaining_pages
        self._set_blocks(remaining_blocks)

        if self._selected_page_id in doomed:
            self._selected_page_id = remaining_pages[0].id if remaining_pages else None

        logging.debug(f"Deleted {len(doomed)} page(s) rooted at {page_id}")

    # Block operations

    def get_page_blocks(self, page_id: str) -> List[Block]:
        """Top-level blocks of a page, in collection order."""
        return self._index().page_blocks(page_id)

    def get_child_blocks(self, parent_block_id: str) -> List[Block]:
        """Blocks filed under a container block, in collection order."""
        return self._index().children_of(parent_block_id)

    def add_block(
        self,
        page_id: str,
        after_block_id: Optional[str] = None,
        parent_block_id: Optional[str] = None,
        initial_content: Optional[str] = None
    ) -> Block:
        """
        Create an empty text block.

        Args:
            page_id: Page that owns the block
            after_block_id: Insert right after this block; appended when
                omitted or unknown
            parent_block_id: Container block to file the new block under
            initial_content: Text to start the block with

        Returns:
            The created block, so callers can keep updating it
        """
        parent = self._index().get(parent_block_id) if parent_block_id else None
        if parent is not None:
            page_id = parent.page_id

        block = Block(
            id=new_id("block"),
            type=BlockType.TEXT,
            content=initial_content or "",
            page_id=page_id,
            parent_block_id=parent_block_id or None
        )

        blocks = list(self._blocks)
        position = self._position(after_block_id) if after_block_id else None
        if position is None:
            blocks.append(block)
        else:
            blocks.insert(position + 1, block)

        if parent_block_id:
            blocks = [
                b.model_copy(update={"children": (b.children or ()) + (block.id,)}) if b.id == parent_block_id else b
                for b in blocks
            ]

        self._set_blocks(blocks)
        return block

    def update_block(self, block_id: str, updates: Dict[str, Any]) -> None:
        """
        Shallow-merge fields into a block.

        ``id``, ``page_id``, ``parent_block_id`` and ``children`` are never
        changed. The merged block is validated before it replaces the
        old one.

        Args:
            block_id: Block to update
            updates: Field values to merge
        """
        position = self._position(block_id)
        if position is None:
            logging.debug(f"update_block: unknown block {block_id}")
            return

        merged = self._blocks[position].model_dump()
        merged.update({k: v for k, v in updates.items() if k not in _IMMUTABLE_BLOCK_FIELDS})
        updated = Block.model_validate(merged)

        blocks = list(self._blocks)
        blocks[position] = updated
        self._set_blocks(blocks)

    def delete_block(self, block_id: str) -> None:
        """
        Delete a block. Container blocks take their direct children with them.

        Args:
            block_id: Block to delete
        """
        block = self._index().get(block_id)
        if block is None:
            return

        doomed = {block_id}
        if block.is_container and block.children:
            doomed.update(block.children)

        blocks = [b for b in self._blocks if b.id not in doomed]
        if block.parent_block_id:
            blocks = [
                b.model_copy(update={"children": tuple(c for c in (b.children or ()) if c != block_id)})
                if b.id == block.parent_block_id else b
                for b in blocks
            ]

        self._set_blocks(blocks)

    def toggle_block_expansion(self, block_id: str) -> None:
        block = self._index().get(block_id)
        if block is not None:
            self.update_block(block_id, {"is_expanded": not block.is_expanded})

    # Roadmap tasks

    def add_roadmap_task(self, **attributes: Any) -> RoadmapTask:
        task = RoadmapTask(**{**attributes, "id": new_id("task")})
        self._roadmap_tasks = self._roadmap_tasks + [task]
        return task

    def update_roadmap_task(self, task_id: str, updates: Dict[str, Any]) -> None:
        self._roadmap_tasks = _merge_by_id(self._roadmap_tasks, task_id, updates)

    def delete_roadmap_task(self, task_id: str) -> None:
        self._roadmap_tasks = [task for task in self._roadmap_tasks if task.id != task_id]

    # Calendar events

    def add_calendar_event(self, **attributes: Any) -> CalendarEvent:
        event = CalendarEvent(**{**attributes, "id": new_id("event")})
        self._calendar_events = self._calendar_events + [event]
        return event

    def update_calendar_event(self, event_id: str, updates: Dict[str, Any]) -> None:
        self._calendar_events = _merge_by_id(self._calendar_events, event_id, updates)

    def delete_calendar_event(self, event_id: str) -> None:
        self._calendar_events = [event for event in self._calendar_events if event.id != event_id]

    # Notifications

    def add_notification(self, title: str, message: str, icon_url: str = "") -> str:
        """
        Queue a notification that removes itself after the configured delay.

        Args:
            title: Headline of the notification
            message: Body text
            icon_url: Icon shown beside the message

        Returns:
            The id assigned to the notification
        """
        notification = Notification(id=new_id("notification"), title=title, message=message, icon_url=icon_url)
        expiry = self._scheduler.call_later(
            self.settings.notification_ttl,
            lambda: self.remove_notification(notification.id)
        )
        self._notifications.append(notification, expiry)
        logging.debug(f"Queued notification {notification.id}: {title}")
        return notification.id

    def remove_notification(self, notification_id: str) -> None:
        self._notifications.discard(notification_id)

    def clear_notifications(self) -> None:
        self._notifications.clear()

    # Internal helpers

    def _index(self) -> BlockIndex:
        if self._block_index is None:
            self._block_index = BlockIndex(self._blocks)
        return self._block_index

    def _set_blocks(self, blocks: List[Block]) -> None:
        self._blocks = blocks
        self._block_index = None

    def _position(self, block_id: str) -> Optional[int]:
        for i, block in enumerate(self._blocks):
            if block.id == block_id:
                return i
        return None

    def _replace_page(self, page_id: str, **fields: Any) -> None:
        self._pages = [page.model_copy(update=fields) if page.id == page_id else page for page in self._pages]


def _merge_by_id(items: List[Any], item_id: str, updates: Dict[str, Any]) -> List[Any]:
    """Return a copy of ``items`` with the matching entity's fields merged and re-validated."""
    merged_items = []
    for item in items:
        if item.id == item_id:
            fields = item.model_dump()
            fields.update({k: v for k, v in updates.items() if k != "id"})
            item = type(item).model_validate(fields)
        merged_items.append(item)
    return merged_items
