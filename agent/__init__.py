# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains an optional Google ADK agent that uses the Quillopy
# tool server.  The server itself (tools/) works with any MCP host; this
# agent is a ready-made host for trying it from the terminal (see main.py).
#
# WHAT THE AGENT DOES:
#   - Decides when a question needs documentation
#   - Calls quillopy_search with a normalized package/language
#   - Answers from the returned snippets and cites their links
#
# It holds no search or formatting logic of its own; that lives in core/.
# =============================================================================
