"""
Tool manager - the board's tool registry.

Each tool owns one engine mode; switching tools switches the mode, and is
refused while a drag or an arrow is in progress.
"""

from typing import Literal, overload

import pygame

from .base_tool import Tool, ToolContext
from .draw_tool import DrawTool
from .move_tool import MoveTool


class ToolManager:
    """Named tools, their hotkeys, and which one receives pointer input."""

    def __init__(self):
        self.tools: dict[str, Tool] = {}
        self.hotkeys: dict[int, str] = {}
        self._active_name: str | None = None

    def register_tool(self, name: str, tool: Tool):
        """Add a tool. Two tools may not share a hotkey."""
        key = tool.get_hotkey()
        owner = self.hotkeys.get(key) if key else None
        if owner is not None:
            raise ValueError(
                f"Hotkey conflict: '{pygame.key.name(key)}' is taken by {owner}, cannot bind {name}"
            )
        if key:
            self.hotkeys[key] = name
        self.tools[name] = tool

    @overload
    def get_tool(self, name: Literal["move"]) -> MoveTool | None: ...

    @overload
    def get_tool(self, name: Literal["draw"]) -> DrawTool | None: ...

    def get_tool(self, name: str) -> Tool | None:
        return self.tools.get(name)

    def set_active_tool(self, name: str, context: ToolContext) -> bool:
        """Make `name` the active tool and put the engine in its mode."""
        tool = self.tools.get(name)
        if tool is None or not context.engine.is_idle:
            return False

        previous = self.get_active_tool()
        if previous is not None and self._active_name != name:
            previous.on_deactivated(context)

        self._active_name = name
        context.engine.set_mode(tool.get_mode())
        tool.on_activated(context)
        return True

    def get_active_tool(self) -> Tool | None:
        if self._active_name is None:
            return None
        return self.tools[self._active_name]

    def get_active_tool_name(self) -> str | None:
        return self._active_name

    def activate_by_hotkey(self, key: int, context: ToolContext) -> bool:
        """Returns True if the key belonged to a tool and the switch happened."""
        name = self.hotkeys.get(key)
        return name is not None and self.set_active_tool(name, context)


def create_default_tools() -> ToolManager:
    manager = ToolManager()
    manager.register_tool("move", MoveTool())
    manager.register_tool("draw", DrawTool())
    return manager
