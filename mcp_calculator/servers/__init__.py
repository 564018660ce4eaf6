"""
MCP servers shipped with the package.
"""
