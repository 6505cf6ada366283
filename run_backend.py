"""
Backend server runner script.

Starts the MCP server that wraps the Saral Loan FastAPI backend.

Usage:
    python run_backend.py

Or with FastMCP CLI:
    fastmcp run saral_backend/mcp_server.py --transport sse --port 8000
"""

import logging
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from saral_backend.config import DEFAULT_API_PORT, LOG_LEVEL
from saral_backend.mcp_server import mcp

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    print(f"Starting Saral Loan MCP Server on http://localhost:{DEFAULT_API_PORT}")
    print("Press Ctrl+C to stop")
    mcp.run(transport="sse", port=DEFAULT_API_PORT)
