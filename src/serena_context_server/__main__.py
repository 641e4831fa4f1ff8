"""Main entry point for the Serena context-server launcher."""

import sys

from serena_context_server.mcp_server import main

if __name__ == "__main__":
    sys.exit(main())
