"""
WPMCP Tool Providers

Modules (registered in this order):
  wpcodebox        — 3 WPCodebox snippet tools
  gutenberg        — 4 Gutenberg block tools
  generateblocks   — 4 GenerateBlocks tools
  wordpress_utils  — 5 WordPress PHP pattern tools
"""

from wpmcp.tools import wpcodebox
from wpmcp.tools import gutenberg
from wpmcp.tools import generateblocks
from wpmcp.tools import wordpress_utils

PROVIDER_MODULES = (wpcodebox, gutenberg, generateblocks, wordpress_utils)

ALL_TOOLS = [tool for module in PROVIDER_MODULES for tool in module.TOOLS]
