"""
Pitch Board - Tools

Board tools for moving tokens and drawing arrows.
"""

from .base_tool import Tool, ToolContext, ToolResult
from .draw_tool import DrawTool
from .move_tool import MoveTool
from .tool_manager import ToolManager, create_default_tools

__all__ = [
    "Tool",
    "ToolContext",
    "ToolResult",
    "ToolManager",
    "MoveTool",
    "DrawTool",
    "create_default_tools",
]
