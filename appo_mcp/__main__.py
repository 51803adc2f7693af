# __main__.py
# python -m appo_mcp

from appo_mcp.server import main

main()
