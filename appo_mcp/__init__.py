# appo_mcp/__init__.py

import os
from .manager import BUNDLED_DOCS_DIR, DocsManager

# Documentation directories: APPO_DOCS_DIR (os.pathsep separated) is scanned
# before the bundled docs, so a local copy can override any bundled resource.
DOCS_DIRS = [d for d in os.getenv("APPO_DOCS_DIR", "").split(os.pathsep) if d] + [str(BUNDLED_DOCS_DIR)]

# Transport used by `python -m appo_mcp`: stdio, sse or http
TRANSPORT = os.getenv("APPO_MCP_TRANSPORT", "stdio")

# Log level name for the server's stderr logging
LOG_LEVEL = os.getenv("APPO_MCP_LOG_LEVEL", "WARNING").upper()

# Initialize the global DocsManager instance as a singleton for the application.
# The index is read-only after this point.
docs_manager = DocsManager(docs_dirs=DOCS_DIRS)
