#!/usr/bin/env python3
"""Convenience script to run the MCP server.

Usage:
    python run_mcp_server.py

Or make it executable:
    chmod +x run_mcp_server.py
    ./run_mcp_server.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from metacog.main import run


if __name__ == "__main__":
    run()
