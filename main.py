#!/usr/bin/env python3
"""
Quantum - Workspace of pages and blocks

Main entry point for Quantum. Loads the sample workspace, applies the page
operations requested on the command line, optionally streams generated
text into the selected page, and prints the resulting workspace.
"""

import asyncio
import logging
import sys
import argparse

from quantum.agents import (
    ContentGenerator, CredentialError, GenerationError, describe_generation_error, stream_into_block
)
from quantum.importers import SampleImporter
from quantum.store import WorkspaceStore
from quantum.config import config


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.get("logging.level", "INFO").upper())
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handlers = [logging.StreamHandler(sys.stdout)]

    log_file = config.log_filename
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=handlers
    )


def print_workspace(store: WorkspaceStore):
    """
    Print the page outline, the selected page's blocks and live notifications.

    Args:
        store: The store to print
    """
    print("\n" + "=" * 60)
    print(f"Workspace: {store.workspace.name}")
    print("=" * 60)

    for depth, page in store.outline():
        marker = "*" if page.id == store.selected_page_id else " "
        print(f"{marker} {'  ' * depth}{page.icon or ''} {page.title}  [{page.id}]")

    page = store.selected_page
    if page:
        print(f"\n{page.title}")
        print("-" * 60)
        for block in store.get_page_blocks(page.id):
            print(f"[{block.type.value}] {block.content}")
            for child in store.get_child_blocks(block.id):
                print(f"    [{child.type.value}] {child.content}")

    if store.notifications:
        print("\nNotifications:")
        for notification in store.notifications:
            print(f"- {notification.title}: {notification.message}")


async def run_session(args) -> WorkspaceStore:
    """
    Run one session against the sample workspace.

    Args:
        args: Parsed command line arguments

    Returns:
        The store after all requested operations were applied
    """
    store = WorkspaceStore.from_importer(SampleImporter(workspace_name=config.workspace_name))

    if args.delete_page:
        logging.info(f"Deleting page {args.delete_page} and its sub-pages")
        store.delete_page(args.delete_page)

    if args.add_page is not None:
        parent_id = args.add_page or None
        page = store.add_page(parent_id)
        if args.title:
            store.update_page_title(page.id, args.title.strip())
        logging.info(f"Added page {page.id}")

    if args.prompt:
        page = store.selected_page
        if page is None:
            store.add_notification("Nothing selected", "Select a page before asking for content.")
        else:
            async with ContentGenerator() as generator:
                if not generator.is_available():
                    logging.warning("Content generation is not configured")
                    store.add_notification("Generation unavailable",
                                           describe_generation_error(CredentialError("not configured")))
                    return store
                try:
                    blocks = store.get_page_blocks(page.id)
                    after = blocks[-1].id if blocks else None
                    block = await stream_into_block(store, generator, page.id, args.prompt, after_block_id=after)
                    logging.info(f"Generated {len(block.content)} characters into {block.id}")
                except GenerationError as e:
                    logging.error(f"Content generation failed: {e}")
                    store.add_notification("Generation failed", describe_generation_error(e))

    return store


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Quantum - Workspace of pages and blocks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Show the sample workspace
  python main.py --add-page "" --title "Notes"     # Add a root page titled Notes
  python main.py --add-page page-project-a         # Add a sub-page under Project A
  python main.py --delete-page page-project-a      # Delete Project A and its sub-pages
  python main.py --prompt "Outline a kick-off agenda"   # Stream generated text into the selected page
        """
    )

    parser.add_argument(
        "--add-page",
        metavar="PARENT_ID",
        nargs="?",
        const="",
        help="Add a page, optionally under PARENT_ID"
    )

    parser.add_argument(
        "--title",
        type=str,
        help="Title for the page created with --add-page"
    )

    parser.add_argument(
        "--delete-page",
        metavar="PAGE_ID",
        help="Delete a page together with its sub-pages and blocks"
    )

    parser.add_argument(
        "--prompt",
        type=str,
        help="Generate content for the selected page from this prompt"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Quantum 0.1.0"
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_arguments()
    setup_logging()

    logging.info("Quantum - Workspace of pages and blocks")

    try:
        store = asyncio.run(run_session(args))
        print_workspace(store)

    except KeyboardInterrupt:
        logging.info("Session interrupted by user")
        print("\nSession interrupted.")

    except Exception as e:
        logging.error(f"Session failed: {e}")
        print(f"\nSession failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
