"""
Sample importer for Quantum.

This module provides a small hardcoded workspace used as the starting
state of a new session and as a fixture in tests.
"""

from datetime import datetime
from typing import List, Optional

from ..models import Block, BlockType, Page, Workspace
from .base import BaseImporter


class SampleImporter(BaseImporter):
    """
    Importer that returns the built-in sample workspace.

    The sample has a "Welcome" page and a "Project A" page with two
    sub-pages; "Project A" starts selected.
    """

    def __init__(self, workspace_name: str = "Quantum"):
        """
        Initialize the sample importer.

        Args:
            workspace_name: Name given to the sample workspace
        """
        self.workspace_name = workspace_name

    def get_workspace(self) -> Workspace:
        return Workspace(id="workspace-1", name=self.workspace_name)

    def get_pages(self) -> List[Page]:
        return [
            Page(id="page-1", title="Welcome", parent_id=None,
                 created_at=datetime(2025, 1, 1), is_expanded=True, icon="👋"),
            Page(id="page-project-a", title="Project A", parent_id=None,
                 created_at=datetime(2025, 1, 2), is_expanded=True, icon="🚀"),
            Page(id="page-sub-1", title="Design Specs", parent_id="page-project-a",
                 created_at=datetime(2025, 1, 3), is_expanded=False, icon="🎨"),
            Page(id="page-sub-2", title="Roadmap", parent_id="page-project-a",
                 created_at=datetime(2025, 1, 4), is_expanded=False, icon="🗺️"),
        ]

    def get_blocks(self) -> List[Block]:
        return [
            Block(id="block-1", type=BlockType.HEADING,
                  content="Welcome to your enhanced workspace!", page_id="page-1"),
            Block(id="block-2", type=BlockType.TEXT,
                  content='This block editor now supports rich content types. '
                          'Try typing "/" to see all available block types.',
                  page_id="page-1"),
            Block(id="block-pa-1", type=BlockType.HEADING,
                  content="Project A Kick-off", page_id="page-project-a"),
        ]

    def get_selected_page_id(self) -> Optional[str]:
        return "page-project-a"
