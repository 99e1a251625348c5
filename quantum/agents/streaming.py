"""
Streaming generated text into workspace blocks.

The generator produces fragments; this module consumes them and writes
the accumulated text into a single block through the store's normal
``update_block`` operation. Stopping early (cancellation or a failure)
leaves whatever was already written in place.
"""

import logging
from typing import Optional

from ..models import Block
from ..store import WorkspaceStore
from .errors import CredentialError, QuotaExceededError
from .runner import ContentGenerator


async def stream_into_block(
    store: WorkspaceStore,
    generator: ContentGenerator,
    page_id: str,
    prompt: str,
    after_block_id: Optional[str] = None,
    parent_block_id: Optional[str] = None,
    agent: str = "writer"
) -> Block:
    """
    Create a block and fill it with a streamed completion.

    The block is added when the first fragment arrives, or empty once a
    stream that produced nothing has finished.

    Args:
        store: Store that owns the page
        generator: Source of the text fragments
        page_id: Page to add the block to
        prompt: Prompt sent to the generator
        after_block_id: Insert the new block after this block
        parent_block_id: Container block to file the new block under
        agent: Writing agent to use

    Returns:
        The block as it stands once the stream is exhausted

    Raises:
        GenerationError: Propagated from the generator; partial content
            already written stays in the block
    """
    block: Optional[Block] = None
    content = ""
    chunks = 0

    # The block is created with the first chunk so an immediate failure leaves the page untouched
    async for chunk in generator.stream_completion(prompt, agent=agent):
        content += chunk
        chunks += 1
        if block is None:
            block = store.add_block(page_id, after_block_id=after_block_id,
                                    parent_block_id=parent_block_id, initial_content=content)
        else:
            store.update_block(block.id, {"content": content})

    if block is None:
        block = store.add_block(page_id, after_block_id=after_block_id, parent_block_id=parent_block_id)

    logging.info(f"Streamed {chunks} chunk(s) into block {block.id}")
    return store.get_block(block.id) or block


def describe_generation_error(error: Exception) -> str:
    """
    Turn a generation failure into a message suitable for the user.

    Args:
        error: The exception raised while streaming

    Returns:
        A short user-facing message
    """
    if isinstance(error, QuotaExceededError):
        return "The AI service quota has been exceeded. Please try again later."
    if isinstance(error, CredentialError):
        return "The AI service is not configured correctly. Check the API key in your settings."
    return "Something went wrong while generating content. Please try again."
