"""
Calculator MCP server: tool set, registration table and stdio host.
"""
