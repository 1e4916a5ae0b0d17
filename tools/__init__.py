# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/.
#   mcp_server.py:
#     1. Declares the quillopy_search tool (name, description, typed params)
#     2. Calls the pure functions in core/ in order
#     3. Returns plain text, the only thing the host needs back
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (core/search.py does)
#   - They do NOT decide how results look (core/formatting.py does)
#
# TOOL CONTRACT:
#   The description and parameter descriptions are what the host's LLM reads
#   to decide WHEN to call the tool and WHAT to pass.  Keep them precise.
# =============================================================================
