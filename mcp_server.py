"""
MCP server wrapping the task list API (`mcp_server.py`)
"""

from mcp.server.fastmcp import FastMCP

from task_client import TaskClient

# Initialize MCP server
mcp = FastMCP("To-Do API MCP Server")

client = TaskClient()


@mcp.resource("todo://list")
def list_tasks() -> list:
    """Fetch all tasks from the task API."""
    return client.list_tasks()


@mcp.tool()
def add_task(description: str) -> dict:
    """Add a new task via the task API."""
    return client.add_task(description)


@mcp.tool()
def complete_task(task_id: int) -> dict:
    """Mark a task as done, removing it from the list."""
    return client.delete_task(task_id)


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
