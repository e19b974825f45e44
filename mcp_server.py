#!/usr/bin/env python3
"""
Image Generator MCP Server - stdio Entry Point

This script runs the MCP server on stdin/stdout so a host process can spawn it
directly, e.g. ``python mcp_server.py``.
"""

import sys

from image_generator.server import main

if __name__ == "__main__":
    sys.exit(main())
