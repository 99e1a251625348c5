"""
Tests for the workspace store.

Covers page hierarchy operations, block ordering and containment,
selection rules and the roadmap and calendar collections.
"""

import unittest

from pydantic import ValidationError

from quantum.importers import SampleImporter
from quantum.models import Block, BlockType
from quantum.store import ManualScheduler, WorkspaceStore, TEMPLATE_CATALOG


def make_store() -> WorkspaceStore:
    return WorkspaceStore.from_importer(SampleImporter(), scheduler=ManualScheduler())


class TestPageOperations(unittest.TestCase):
    """Test creating, renaming and deleting pages."""

    def setUp(self):
        self.store = make_store()

    def test_sample_workspace_loaded(self):
        """Test the store starts from the importer's contents."""
        self.assertEqual(self.store.workspace.name, "Quantum")
        self.assertEqual([p.id for p in self.store.pages],
                         ["page-1", "page-project-a", "page-sub-1", "page-sub-2"])
        self.assertEqual(self.store.selected_page_id, "page-project-a")
        self.assertIsNone(self.store.selected_template_id)
        self.assertEqual(len(self.store.templates), 2)

    def test_add_root_page(self):
        """Test adding a root page selects it and gives it an empty text block."""
        self.store.select_template("template-roadmap")

        page = self.store.add_page()

        self.assertIsNone(page.parent_id)
        self.assertEqual(page.title, "Untitled")
        self.assertFalse(page.is_expanded)
        self.assertEqual(self.store.pages[-1].id, page.id)
        self.assertEqual(self.store.selected_page_id, page.id)
        self.assertIsNone(self.store.selected_template_id)

        blocks = self.store.get_page_blocks(page.id)
        self.assertEqual(len(blocks), 1)
        self.assertEqual(blocks[0].type, BlockType.TEXT)
        self.assertEqual(blocks[0].content, "")

    def test_add_child_page_expands_parent(self):
        """Test that adding a child always leaves the parent expanded."""
        self.assertFalse(self.store.get_page("page-sub-1").is_expanded)

        child = self.store.add_page("page-sub-1")

        self.assertEqual(child.parent_id, "page-sub-1")
        self.assertTrue(self.store.get_page("page-sub-1").is_expanded)

        # Already expanded parents stay expanded
        self.store.add_page("page-project-a")
        self.assertTrue(self.store.get_page("page-project-a").is_expanded)

    def test_update_title_and_icon(self):
        """Test replacing page fields; titles are stored untrimmed."""
        self.store.update_page_title("page-1", "  Hello  ")
        self.store.update_page_icon("page-1", "🌟")

        page = self.store.get_page("page-1")
        self.assertEqual(page.title, "  Hello  ")
        self.assertEqual(page.icon, "🌟")

    def test_updates_to_unknown_page_are_noops(self):
        """Test that unknown page ids leave the store untouched."""
        before = self.store.pages

        self.store.update_page_title("missing", "x")
        self.store.update_page_icon("missing", "x")
        self.store.toggle_page_expansion("missing")
        self.store.delete_page("missing")

        self.assertEqual(self.store.pages, before)

    def test_toggle_page_expansion(self):
        """Test flipping a page's expansion state."""
        self.store.toggle_page_expansion("page-1")
        self.assertFalse(self.store.get_page("page-1").is_expanded)

        self.store.toggle_page_expansion("page-1")
        self.assertTrue(self.store.get_page("page-1").is_expanded)

    def test_delete_page_cascades_to_subtree_and_blocks(self):
        """Test deleting Project A removes its sub-pages and all their blocks."""
        sub_block = self.store.add_block("page-sub-1", initial_content="spec")
        grandchild = self.store.add_page("page-sub-1")

        self.store.delete_page("page-project-a")

        remaining = {p.id for p in self.store.pages}
        self.assertEqual(remaining, {"page-1"})

        doomed = {"page-project-a", "page-sub-1", "page-sub-2", grandchild.id}
        self.assertFalse(any(b.page_id in doomed for b in self.store.blocks))
        self.assertIsNone(self.store.get_block(sub_block.id))
        self.assertIsNone(self.store.get_block("block-pa-1"))

        # Blocks of surviving pages are untouched
        self.assertEqual([b.id for b in self.store.get_page_blocks("page-1")], ["block-1", "block-2"])

    def test_delete_selected_page_moves_selection_to_first_page(self):
        """Test selection repair when the selected page is deleted."""
        self.store.select_page("page-sub-2")

        self.store.delete_page("page-project-a")

        self.assertEqual(self.store.selected_page_id, "page-1")

    def test_delete_last_page_clears_selection(self):
        """Test selection becomes None when no pages remain."""
        self.store.delete_page("page-1")
        self.store.delete_page("page-project-a")

        self.assertEqual(self.store.pages, [])
        self.assertIsNone(self.store.selected_page_id)
        self.assertIsNone(self.store.selected_page)
        self.assertEqual(self.store.blocks, [])

    def test_delete_unselected_page_keeps_selection(self):
        """Test deleting another page does not move the selection."""
        self.store.delete_page("page-1")

        self.assertEqual(self.store.selected_page_id, "page-project-a")

    def test_workspace_rename(self):
        """Test renaming the workspace."""
        self.store.update_workspace_name("Research")

        self.assertEqual(self.store.workspace.name, "Research")

    def test_outline_hides_collapsed_children(self):
        """Test the sidebar outline follows expansion state."""
        outline = [(depth, page.id) for depth, page in self.store.outline()]
        self.assertEqual(outline, [
            (0, "page-1"),
            (0, "page-project-a"),
            (1, "page-sub-1"),
            (1, "page-sub-2"),
        ])

        self.store.toggle_page_expansion("page-project-a")
        self.assertEqual([page.id for _, page in self.store.outline()], ["page-1", "page-project-a"])


class TestSelection(unittest.TestCase):
    """Test the page/template selection rules."""

    def setUp(self):
        self.store = make_store()

    def test_select_template_clears_page(self):
        """Test selecting a template clears the page selection."""
        self.store.select_template("template-calendar")

        self.assertIsNone(self.store.selected_page_id)
        self.assertEqual(self.store.selected_template_id, "template-calendar")
        self.assertEqual(self.store.selected_template.name, "Calendar")

    def test_select_page_clears_template(self):
        """Test selecting a page clears the template selection."""
        self.store.select_template("template-roadmap")
        self.store.select_page("page-1")

        self.assertIsNone(self.store.selected_template_id)
        self.assertEqual(self.store.selected_page.title, "Welcome")

    def test_toggle_sidebar_is_independent_of_selection(self):
        """Test the sidebar flag does not touch selection."""
        self.store.toggle_sidebar()
        self.assertTrue(self.store.is_sidebar_collapsed)
        self.assertEqual(self.store.selected_page_id, "page-project-a")

        self.store.toggle_sidebar()
        self.assertFalse(self.store.is_sidebar_collapsed)


class TestBlockOperations(unittest.TestCase):
    """Test block ordering, containment and deletion."""

    def setUp(self):
        self.store = make_store()

    def test_get_page_blocks_in_collection_order(self):
        """Test top-level blocks come back in collection order."""
        blocks = self.store.get_page_blocks("page-1")

        self.assertEqual([b.id for b in blocks], ["block-1", "block-2"])
        self.assertEqual(self.store.get_page_blocks("missing"), [])

    def test_add_block_appends_by_default(self):
        """Test blocks without a position go to the end."""
        block = self.store.add_block("page-1", initial_content="hello")

        self.assertEqual(block.content, "hello")
        self.assertEqual(block.type, BlockType.TEXT)
        self.assertEqual(self.store.blocks[-1].id, block.id)
        self.assertEqual([b.id for b in self.store.get_page_blocks("page-1")],
                         ["block-1", "block-2", block.id])

    def test_add_block_after_sibling(self):
        """Test inserting directly after a given block."""
        block = self.store.add_block("page-1", after_block_id="block-1")

        ids = [b.id for b in self.store.get_page_blocks("page-1")]
        self.assertEqual(ids, ["block-1", block.id, "block-2"])

        flat = [b.id for b in self.store.blocks]
        self.assertEqual(flat.index(block.id), flat.index("block-1") + 1)

    def test_add_block_after_unknown_sibling_appends(self):
        """Test an unknown anchor falls back to appending."""
        block = self.store.add_block("page-1", after_block_id="missing")

        self.assertEqual(self.store.blocks[-1].id, block.id)

    def test_add_child_block_to_container(self):
        """Test filing a block under a toggle block."""
        toggle = self.store.add_block("page-1")
        self.store.update_block(toggle.id, {"type": "toggle"})

        child = self.store.add_block("page-1", parent_block_id=toggle.id, initial_content="inside")

        self.assertEqual(child.parent_block_id, toggle.id)
        self.assertEqual(self.store.get_block(toggle.id).children, (child.id,))
        self.assertEqual([b.id for b in self.store.get_child_blocks(toggle.id)], [child.id])
        # Children are not top-level blocks
        self.assertNotIn(child.id, [b.id for b in self.store.get_page_blocks("page-1")])

    def test_child_block_follows_parent_page(self):
        """Test a child block always lives on its container's page."""
        toggle = self.store.add_block("page-1")

        child = self.store.add_block("page-project-a", parent_block_id=toggle.id)

        self.assertEqual(child.page_id, "page-1")

    def test_update_block_merges_fields(self):
        """Test shallow merge of block fields."""
        self.store.update_block("block-2", {"content": "changed", "type": "quote"})

        block = self.store.get_block("block-2")
        self.assertEqual(block.content, "changed")
        self.assertEqual(block.type, BlockType.QUOTE)
        self.assertEqual(block.page_id, "page-1")

    def test_update_block_never_moves_block_between_pages(self):
        """Test id and page_id are not overwritten by updates."""
        self.store.update_block("block-2", {"page_id": "page-project-a", "id": "other"})

        block = self.store.get_block("block-2")
        self.assertEqual(block.page_id, "page-1")
        self.assertIsNone(self.store.get_block("other"))

    def test_update_block_keeps_container_linkage(self):
        """Test updates cannot detach a child or rewrite a container's children."""
        toggle = self.store.add_block("page-1")
        self.store.update_block(toggle.id, {"type": "toggle"})
        child = self.store.add_block("page-1", parent_block_id=toggle.id)

        self.store.update_block(child.id, {"parent_block_id": None, "content": "kept"})
        self.store.update_block(toggle.id, {"children": ("block-1",)})

        self.assertEqual(self.store.get_block(child.id).parent_block_id, toggle.id)
        self.assertEqual(self.store.get_block(child.id).content, "kept")
        self.assertEqual(self.store.get_block(toggle.id).children, (child.id,))

        # Deleting the container only takes its real children
        self.store.delete_block(toggle.id)
        self.assertIsNone(self.store.get_block(child.id))
        self.assertIsNotNone(self.store.get_block("block-1"))

    def test_update_block_rejects_invalid_values(self):
        """Test invalid updates raise and leave the block unchanged."""
        with self.assertRaises(ValidationError):
            self.store.update_block("block-2", {"type": "spreadsheet"})

        self.assertEqual(self.store.get_block("block-2").type, BlockType.TEXT)

    def test_update_unknown_block_is_noop(self):
        """Test updating an unknown block changes nothing."""
        before = self.store.blocks

        self.store.update_block("missing", {"content": "x"})
        self.store.toggle_block_expansion("missing")

        self.assertEqual(self.store.blocks, before)

    def test_delete_container_removes_children(self):
        """Test deleting a toggle takes its direct children with it."""
        toggle = self.store.add_block("page-1")
        self.store.update_block(toggle.id, {"type": "toggle"})
        first = self.store.add_block("page-1", parent_block_id=toggle.id)
        second = self.store.add_block("page-1", parent_block_id=toggle.id)

        self.store.delete_block(toggle.id)

        remaining = {b.id for b in self.store.blocks}
        self.assertNotIn(toggle.id, remaining)
        self.assertNotIn(first.id, remaining)
        self.assertNotIn(second.id, remaining)
        self.assertEqual(self.store.get_child_blocks(toggle.id), [])

    def test_delete_plain_block_keeps_filed_children(self):
        """Test only container blocks cascade."""
        parent = self.store.add_block("page-1")
        child = self.store.add_block("page-1", parent_block_id=parent.id)

        self.store.delete_block(parent.id)

        self.assertIsNotNone(self.store.get_block(child.id))

    def test_delete_child_unlinks_from_parent(self):
        """Test deleting a child removes it from its container's children."""
        toggle = self.store.add_block("page-1")
        self.store.update_block(toggle.id, {"type": "toggle"})
        first = self.store.add_block("page-1", parent_block_id=toggle.id)
        second = self.store.add_block("page-1", parent_block_id=toggle.id)

        self.store.delete_block(first.id)

        self.assertEqual(self.store.get_block(toggle.id).children, (second.id,))
        self.assertEqual([b.id for b in self.store.get_child_blocks(toggle.id)], [second.id])

    def test_delete_block_twice_is_idempotent(self):
        """Test a second delete has no further effect."""
        self.store.delete_block("block-1")
        after_first = self.store.blocks

        self.store.delete_block("block-1")

        self.assertEqual(self.store.blocks, after_first)
        self.assertEqual([b.id for b in self.store.get_page_blocks("page-1")], ["block-2"])

    def test_toggle_block_expansion(self):
        """Test expansion starts unset and flips on each toggle."""
        self.assertIsNone(self.store.get_block("block-1").is_expanded)

        self.store.toggle_block_expansion("block-1")
        self.assertTrue(self.store.get_block("block-1").is_expanded)

        self.store.toggle_block_expansion("block-1")
        self.assertFalse(self.store.get_block("block-1").is_expanded)

    def test_returned_collections_are_copies(self):
        """Test callers cannot change store state through returned lists."""
        blocks = self.store.blocks
        blocks.clear()
        page_blocks = self.store.get_page_blocks("page-1")
        page_blocks.append(Block(id="rogue", page_id="page-1"))

        self.assertEqual(len(self.store.blocks), 3)
        self.assertEqual(len(self.store.get_page_blocks("page-1")), 2)


class TestRoadmapAndCalendar(unittest.TestCase):
    """Test the flat roadmap and calendar collections."""

    def setUp(self):
        self.store = WorkspaceStore(scheduler=ManualScheduler())

    def test_empty_store_defaults(self):
        """Test a store without an importer."""
        self.assertEqual(self.store.pages, [])
        self.assertEqual(tuple(self.store.templates), TEMPLATE_CATALOG)
        self.assertIsNone(self.store.selected_page)

    def test_roadmap_task_lifecycle(self):
        """Test adding, updating and deleting roadmap tasks."""
        task = self.store.add_roadmap_task(title="Design review", status="todo")
        self.assertTrue(task.id.startswith("task-"))

        self.store.update_roadmap_task(task.id, {"status": "done", "id": "hijack"})
        updated = self.store.roadmap_tasks[0]
        self.assertEqual(updated.id, task.id)
        self.assertEqual(updated.model_dump()["status"], "done")
        self.assertEqual(updated.title, "Design review")

        self.store.delete_roadmap_task(task.id)
        self.store.delete_roadmap_task(task.id)
        self.assertEqual(self.store.roadmap_tasks, [])

    def test_add_roadmap_task_ignores_supplied_id(self):
        """Test ids are always assigned by the store."""
        task = self.store.add_roadmap_task(id="mine", title="x")

        self.assertNotEqual(task.id, "mine")

    def test_calendar_event_lifecycle(self):
        """Test adding, updating and deleting calendar events."""
        first = self.store.add_calendar_event(title="Launch", date="2025-03-01")
        second = self.store.add_calendar_event(title="Retro")
        self.assertTrue(first.id.startswith("event-"))

        self.store.update_calendar_event("missing", {"title": "x"})
        self.store.update_calendar_event(first.id, {"title": "Launch day"})
        self.assertEqual([e.title for e in self.store.calendar_events], ["Launch day", "Retro"])

        self.store.delete_calendar_event(first.id)
        self.assertEqual([e.id for e in self.store.calendar_events], [second.id])


if __name__ == '__main__':
    unittest.main()
