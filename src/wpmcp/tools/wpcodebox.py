"""
WPCodebox Tools — snippet formatting and validation

Tools:
  format_wpcodebox_snippet    — Wrap code in a WPCodebox metadata docblock
  get_wpcodebox_guidelines    — WPCodebox usage guidelines
  validate_wpcodebox_snippet  — Check a snippet against WPCodebox requirements
"""

from typing import Any, Dict, List

from wpmcp.server.registry import ToolDescriptor

LANGUAGES = ["php", "javascript", "css", "html"]
SCOPES = ["global", "admin", "frontend"]


def validate_snippet(snippet: Dict[str, Any]) -> Dict[str, Any]:
    """Return {"valid", "errors", "warnings"} for a snippet."""
    errors: List[str] = []
    warnings: List[str] = []

    title = snippet.get("title") or ""
    code = snippet.get("code") or ""
    language = snippet.get("language")
    scope = snippet.get("scope")
    priority = snippet.get("priority")

    if not title.strip():
        errors.append("Title is required")
    if not code.strip():
        errors.append("Code is required")

    if not language:
        errors.append("Language is required")
    elif language not in LANGUAGES:
        errors.append("Language must be one of: php, javascript, css, html")

    if language == "php":
        if "<?php" not in code:
            warnings.append("PHP code should start with <?php tag")
        if code.strip().endswith("?>"):
            warnings.append("PHP code should not end with closing ?> tag")

    if scope and scope not in SCOPES:
        errors.append("Scope must be one of: global, admin, frontend")

    if priority is not None and (priority < 1 or priority > 999):
        warnings.append("Priority should be between 1 and 999")

    return {"valid": not errors, "errors": errors, "warnings": warnings}


def format_snippet(snippet: Dict[str, Any]) -> str:
    title = snippet["title"]
    code = snippet["code"]
    language = snippet["language"]
    description = snippet.get("description") or "WordPress code snippet"
    tags = snippet.get("tags") or []
    scope = snippet.get("scope") or "global"
    priority = snippet.get("priority", 10)
    active = snippet.get("active", True)

    header = (
        "/**\n"
        f" * {title}\n"
        " *\n"
        f" * {description}\n"
        " *\n"
        f" * Language: {language.upper()}\n"
        f" * Scope: {scope}\n"
        f" * Priority: {priority}\n"
        f" * Active: {'Yes' if active else 'No'}\n"
        f" * Tags: {', '.join(tags) if tags else 'none'}\n"
        " */\n\n"
    )

    if language == "php" and code.strip().startswith("<?php"):
        # Keep the opening tag first, metadata after it
        body = code.strip()[len("<?php"):].lstrip("\n")
        return "<?php\n" + header + body
    if language == "php":
        return "<?php\n" + header + code
    return header + code


def _format_wpcodebox_snippet(args: Dict[str, Any]) -> str:
    validation = validate_snippet(args)
    if not validation["valid"]:
        return "Validation errors:\n" + "\n".join(validation["errors"])
    return format_snippet(args)


def _validate_wpcodebox_snippet(args: Dict[str, Any]) -> str:
    validation = validate_snippet(args)

    result = f"Validation {'PASSED' if validation['valid'] else 'FAILED'}\n\n"
    if validation["errors"]:
        result += "Errors:\n" + "\n".join(f"- {e}" for e in validation["errors"]) + "\n\n"
    if validation["warnings"]:
        result += "Warnings:\n" + "\n".join(f"- {w}" for w in validation["warnings"]) + "\n"
    if validation["valid"] and not validation["warnings"]:
        result += "No issues found. Snippet is ready for WPCodebox."
    return result


def _get_wpcodebox_guidelines(args: Dict[str, Any]) -> str:
    return GUIDELINES


GUIDELINES = """# WPCodebox Usage Guidelines

## Overview
WPCodebox is a WordPress plugin for managing code snippets. This guide helps you format code properly for WPCodebox.

## Snippet Structure

### Required Fields
- **Title**: Clear, descriptive name for the snippet
- **Code**: The actual code to execute
- **Language**: php, javascript, css, or html

### Optional Fields
- **Description**: Explanation of what the snippet does
- **Tags**: Array of tags for organization
- **Scope**: Where the code runs (global, admin, frontend)
- **Priority**: Execution priority (default: 10)
- **Active**: Whether snippet is active (default: true)

## Best Practices

### PHP Snippets
- Always start with <?php tag
- Never include closing ?> tag
- Use WordPress functions and hooks
- Include proper sanitization and escaping

### JavaScript Snippets
- Use vanilla JavaScript or jQuery (if enqueued)
- Localize strings using wp.i18n
- Properly enqueue scripts via wp_enqueue_script

### CSS Snippets
- Use specific selectors to avoid conflicts
- Consider GeneratePress/GenerateBlocks compatibility
- Avoid !important unless necessary

## Scope Options
- **Global**: runs in admin and frontend (hooks, post types, taxonomies)
- **Admin**: runs only in wp-admin (menus, notices, dashboard widgets)
- **Frontend**: runs only on the public site (theme tweaks, frontend scripts)

## Security Considerations
- Always sanitize user input
- Escape output properly
- Verify nonces for form submissions
- Check user capabilities
"""


_SNIPPET_PROPERTIES = {
    "title": {"type": "string", "description": "Snippet title"},
    "code": {"type": "string", "description": "The code to format"},
    "language": {
        "type": "string",
        "enum": LANGUAGES,
        "description": "Programming language",
    },
    "description": {
        "type": "string",
        "description": "Optional description of what the snippet does",
    },
    "tags": {
        "type": "array",
        "items": {"type": "string"},
        "description": "Optional array of tags for organization",
    },
    "scope": {
        "type": "string",
        "enum": SCOPES,
        "description": "Where the code should run (default: global)",
    },
    "priority": {"type": "number", "description": "Execution priority (default: 10)"},
    "active": {"type": "boolean", "description": "Whether snippet should be active (default: true)"},
}

TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="format_wpcodebox_snippet",
        description="Format a code snippet for WPCodebox plugin with proper structure and metadata",
        input_schema={
            "type": "object",
            "properties": _SNIPPET_PROPERTIES,
            "required": ["title", "code", "language"],
        },
        handler=_format_wpcodebox_snippet,
    ),
    ToolDescriptor(
        name="get_wpcodebox_guidelines",
        description="Get WPCodebox usage guidelines and best practices",
        input_schema={"type": "object", "properties": {}},
        handler=_get_wpcodebox_guidelines,
    ),
    ToolDescriptor(
        name="validate_wpcodebox_snippet",
        description="Validate a snippet structure against WPCodebox requirements",
        input_schema={
            "type": "object",
            "properties": {
                key: _SNIPPET_PROPERTIES[key]
                for key in ("title", "code", "language", "scope", "priority")
            },
            "required": ["title", "code", "language"],
        },
        handler=_validate_wpcodebox_snippet,
    ),
]
