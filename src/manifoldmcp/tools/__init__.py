"""Tool layer: catalog, request translation, response rendering and dispatch."""

from manifoldmcp.tools.catalog import ToolDescriptor, list_tools
from manifoldmcp.tools.dispatcher import Dispatcher
from manifoldmcp.tools.operations import OPERATIONS, Operation

__all__ = ["Dispatcher", "OPERATIONS", "Operation", "ToolDescriptor", "list_tools"]
