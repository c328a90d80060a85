"""WordPress Gutenberg MCP Server — templates and knowledge base over MCP."""

__version__ = "1.0.0"
