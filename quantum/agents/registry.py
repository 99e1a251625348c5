"""
Agent Registry for Quantum.

This module defines the writing agents available to the content-generation
integration: each agent is a named system prompt that shapes how the model
answers a user's prompt before the text is streamed into a block.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass


@dataclass
class AgentConfig:
    """
    Configuration for a writing agent.
    """
    name: str
    description: str
    system_prompt: str


class AgentRegistry:
    """
    Registry of all available writing agents.
    """

    def __init__(self):
        """Initialize the agent registry with default agents."""
        self._agents: Dict[str, AgentConfig] = {}
        self._register_default_agents()

    def _register_default_agents(self):
        """Register the default agents used by Quantum."""

        # Writer - answers a prompt with new block content
        self.register_agent(AgentConfig(
            name="writer",
            description="Writes new content for a page from a prompt",
            system_prompt="""You are a writing assistant embedded in a note-taking workspace. Answer the user's request with content that can be pasted directly into their page.

Guidelines:
1. Write plain prose or short Markdown lists, no front matter
2. Keep the answer focused on the request
3. Do not mention that you are an assistant or repeat the request"""
        ))

        # Continue - extends existing text in the same voice
        self.register_agent(AgentConfig(
            name="continue",
            description="Continues the text given in the prompt",
            system_prompt="""You continue the user's text. Match its tone, tense and formatting, and output only the continuation without repeating what was given."""
        ))

    def register_agent(self, config: AgentConfig) -> None:
        """
        Register a new agent configuration.

        Args:
            config: The agent configuration to register
        """
        self._agents[config.name] = config

    def get_agent(self, name: str) -> Optional[AgentConfig]:
        """
        Get an agent configuration by name.

        Args:
            name: The name of the agent

        Returns:
            The agent configuration, or None if not found
        """
        return self._agents.get(name)

    def list_agents(self) -> List[str]:
        """
        Get a list of all registered agent names.

        Returns:
            List of agent names
        """
        return list(self._agents.keys())


# Global agent registry instance
agent_registry = AgentRegistry()
