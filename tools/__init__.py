"""Tool registry and execution.

Importing this package registers every tool with the registry in tools.base.
"""

import tools.speak  # noqa: F401  (registers Speak)
from tools.base import execute_tool, get_tools

__all__ = ["execute_tool", "get_tools"]
