"""
Quantum: an in-memory workspace of pages and content blocks.

Organizes content into a hierarchy of pages, each holding an ordered list of
blocks, and can stream AI-generated text straight into a page.
"""

__version__ = "0.1.0"
__author__ = "Quantum Project"

# Import main components
from .models import Workspace, Page, Block, BlockType, Template, Notification
from .store import WorkspaceStore
from .importers import BaseImporter, SampleImporter
from .agents import ContentGenerator, stream_into_block

__all__ = [
    "Workspace",
    "Page",
    "Block",
    "BlockType",
    "Template",
    "Notification",
    "WorkspaceStore",
    "BaseImporter",
    "SampleImporter",
    "ContentGenerator",
    "stream_into_block"
]
