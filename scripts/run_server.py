"""Run the Open-Meteo MCP server (stdio by default, ``--http`` for the debug API)."""
from __future__ import annotations

import sys

from meteo_mcp.server import main


if __name__ == "__main__":
    sys.exit(main())
