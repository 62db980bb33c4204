import sys

from meteo_mcp.server import main

sys.exit(main())
