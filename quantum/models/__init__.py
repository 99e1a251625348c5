"""Data models for Quantum."""

from .workspace import Workspace, Page, Block, BlockType, Template, TemplateType
from .entities import RoadmapTask, CalendarEvent, Notification

__all__ = [
    "Workspace",
    "Page",
    "Block",
    "BlockType",
    "Template",
    "TemplateType",
    "RoadmapTask",
    "CalendarEvent",
    "Notification"
]
