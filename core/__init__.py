# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the documentation-search logic: data models, the
# request builder, the Quillopy API client and the response formatter.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any agent
#   framework.  The only third-party dependency is httpx for the HTTP call,
#   so everything here can be tested with a mock transport and no server.
# =============================================================================
