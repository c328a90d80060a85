"""
Knowledge-base resources — markdown documents served by uri

Each document lives in Config.RESOURCES_DIR as <slug>.md and is read on
every resources/read, so edits show up without a restart.
"""

import asyncio
from pathlib import Path
from typing import List

from wpmcp.config import Config
from wpmcp.server.registry import ResourceDescriptor

URI_PREFIX = "resource://wordpress-gutenberg-mcp/"

DOCUMENTS = [
    (
        "coding-standards",
        "WordPress Coding Standards",
        "WordPress coding standards reference for PHP, JavaScript, and CSS",
    ),
    (
        "gutenberg-patterns",
        "Gutenberg Block Development Patterns",
        "Common Gutenberg block development patterns and examples",
    ),
    (
        "generateblocks-guide",
        "GenerateBlocks Development Guide",
        "Best practices for GenerateBlocks plugin development",
    ),
    (
        "wpcodebox-format",
        "WPCodebox Snippet Format",
        "WPCodebox snippet format specifications and structure",
    ),
    (
        "generatepress-guide",
        "GeneratePress Theme Guide",
        "GeneratePress theme-specific development guidelines",
    ),
]


def document_path(slug: str) -> Path:
    return Path(Config.RESOURCES_DIR) / f"{slug}.md"


def markdown_provider(slug: str):
    """Build a provider that reads <slug>.md off the event loop."""
    async def provide() -> str:
        return await asyncio.to_thread(document_path(slug).read_text, encoding="utf-8")
    provide.__name__ = f"provide_{slug.replace('-', '_')}"
    return provide


def build_resources() -> List[ResourceDescriptor]:
    return [
        ResourceDescriptor(
            uri=URI_PREFIX + slug,
            name=name,
            description=description,
            mime_type="text/markdown",
            provider=markdown_provider(slug),
        )
        for slug, name, description in DOCUMENTS
    ]
