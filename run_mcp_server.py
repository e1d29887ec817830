"""Entrypoint for running the activity-ranking MCP server.

Usage:
  python run_mcp_server.py [--host 127.0.0.1] [--port 8765] [--transport stdio]

Or via an MCP host config pointing to this script with --transport stdio.
"""
from mcp_tools_activities.mcp.server import main

if __name__ == "__main__":
    main()
