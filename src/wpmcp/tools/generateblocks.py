"""
GenerateBlocks Tools — markup, CSS and template scaffolding

Tools:
  generate_gb_block          — Block comment markup plus PHP filter examples
  generate_gb_styles         — Scoped CSS and wp_add_inline_style() wiring
  generate_gb_template       — Multi-block template markup and PHP array form
  get_generateblocks_guide   — GenerateBlocks development guide
"""

import json
import re
from typing import Any, Dict, List

from wpmcp.server.registry import ToolDescriptor

FENCE = "```"
BLOCK_TYPES = ["container", "grid", "headline", "button", "image", "query-loop"]

COMMON_ATTRIBUTES = {
    "container": ["containerWidth", "paddingTop", "paddingBottom", "marginTop", "backgroundColor"],
    "grid": ["columns", "columnGap", "rowGap", "verticalAlignment", "horizontalAlignment"],
    "headline": ["element", "fontSize", "fontWeight", "textAlign", "textColor"],
    "button": ["url", "target", "rel", "backgroundColor", "textColor", "borderRadius"],
    "image": ["mediaId", "sizeSlug", "width", "height", "objectFit"],
    "query-loop": ["query", "postType", "perPage", "orderBy", "order"],
}


def _block_markup(block_type: str, attributes: Dict[str, Any], inner: List[str]) -> str:
    attrs = f" {json.dumps(attributes, ensure_ascii=False)}" if attributes else ""
    body = "\n".join(f"\t{b}" for b in inner) if inner else "\t<!-- Inner blocks here -->"
    return (
        f"<!-- wp:generateblocks/{block_type}{attrs} -->\n"
        f'<div class="gb-{block_type}">\n'
        f"{body}\n"
        "</div>\n"
        f"<!-- /wp:generateblocks/{block_type} -->"
    )


def _php_array(value: Any, depth: int = 0) -> str:
    """Render a JSON-like value as a PHP array() literal."""
    pad = "\t" * (depth + 1)
    if isinstance(value, dict):
        if not value:
            return "array()"
        items = ",\n".join(
            f"{pad}'{k}' => {_php_array(v, depth + 1)}" for k, v in value.items()
        )
        return "array(\n" + items + ",\n" + "\t" * depth + ")"
    if isinstance(value, list):
        if not value:
            return "array()"
        return "array( " + ", ".join(_php_array(v, depth) for v in value) + " )"
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    return "'" + str(value).replace("\\", "\\\\").replace("'", "\\'") + "'"


def generate_gb_block(args: Dict[str, Any]) -> str:
    block_type = args["type"]
    if block_type not in BLOCK_TYPES:
        raise ValueError(f"Unknown GenerateBlocks block type: {block_type}")
    attributes = args.get("attributes") or {}
    inner_blocks = args.get("innerBlocks") or []
    fn = block_type.replace("-", "_")

    php_code = f"""<?php
/**
 * GenerateBlocks {block_type} block customisation
 */
function custom_gb_{fn}_attributes( $attributes, $block ) {{
	// Modify attributes as needed
	return $attributes;
}}
add_filter( 'generateblocks_attr_{block_type}', 'custom_gb_{fn}_attributes', 10, 2 );

function custom_gb_{fn}_css( $css, $attributes, $block ) {{
	if ( 'generateblocks/{block_type}' === $block['blockName'] ) {{
		$css .= '.gb-{block_type} {{ /* Custom styles */ }}';
	}}
	return $css;
}}
add_filter( 'generateblocks_css', 'custom_gb_{fn}_css', 10, 3 );
"""

    common = "\n".join(f"- `{a}`" for a in COMMON_ATTRIBUTES[block_type])

    return f"""# GenerateBlocks {block_type.replace('-', ' ').title()} Block

## Block Markup

{FENCE}html
{_block_markup(block_type, attributes, inner_blocks)}
{FENCE}

## PHP Integration

{FENCE}php
{php_code}{FENCE}

## Common Attributes

{common}

## Usage Notes

- GenerateBlocks blocks are lightweight and performance-optimized
- Use GenerateBlocks hooks for customization
- Test with GeneratePress theme for best compatibility
"""


def generate_gb_styles(args: Dict[str, Any]) -> str:
    block_type = args["blockType"]
    selector = args["selector"]
    styles = args["styles"]
    if not isinstance(styles, dict):
        raise TypeError("styles must be an object of CSS property/value pairs")
    fn = re.sub(r"[^a-z0-9]+", "_", block_type.lower()).strip("_")

    declarations = "\n".join(f"\t{prop}: {value};" for prop, value in styles.items())
    css_code = f"""/**
 * GenerateBlocks {block_type} Custom Styles
 *
 * Target: {selector}
 */

{selector} {{
{declarations}
}}

@media (max-width: 768px) {{
	{selector} {{
		/* Mobile-specific styles */
	}}
}}
"""

    inline_css = "\n".join(f"\t\t{line}" for line in css_code.split("\n"))
    inline_css = inline_css.replace("'", "\\'")
    php_code = f"""<?php
function add_gb_{fn}_custom_css() {{
	$css = '
{inline_css}
	';

	wp_add_inline_style( 'generateblocks', $css );
}}
add_action( 'wp_enqueue_scripts', 'add_gb_{fn}_custom_css', 100 );
"""

    return f"""# GenerateBlocks {block_type} Custom Styles

## CSS

{FENCE}css
{css_code}{FENCE}

## PHP Integration

{FENCE}php
{php_code}{FENCE}

## Best Practices

- Use GenerateBlocks CSS variables when available
- Target specific block classes for specificity
- Use responsive breakpoints (768px, 1024px)
- Avoid !important unless necessary
"""


def generate_gb_template(args: Dict[str, Any]) -> str:
    name = args["name"]
    blocks = args["blocks"]
    description = args.get("description") or ""
    fn = re.sub(r"\s+", "_", name.strip().lower())

    markup = "\n\n".join(
        _block_markup(b["type"], b.get("attributes") or {}, ["<!-- Block content -->"])
        for b in blocks
    )
    rows = []
    for b in blocks:
        attrs = _php_array(b.get("attributes") or {}, 4)
        rows.append(f"\t\t\t\tarray( 'generateblocks/{b['type']}', {attrs}, array() ),")
    inner = "\n".join(rows)

    php_code = f"""<?php
/**
 * Template: {name}
 *
 * {description}
 */
function register_{fn}_template() {{
	$template = array(
		array( 'generateblocks/container', array(
			'containerWidth' => '1200px',
			'paddingTop'     => '60px',
			'paddingBottom'  => '60px',
		), array(
{inner}
		) ),
	);

	return $template;
}}
"""

    return f"""# GenerateBlocks Template: {name}

## Template Structure

{FENCE}html
{markup}
{FENCE}

## PHP Registration

{FENCE}php
{php_code}{FENCE}

## Usage

This template can be used with block patterns, template parts, full site
editing and the GenerateBlocks Query Loop.
"""


def get_generateblocks_guide(args: Dict[str, Any]) -> str:
    return GUIDE


GUIDE = """# GenerateBlocks Development Guide

## Core Blocks
- **Container**: padding, margin and background controls; nestable; layout structure
- **Grid**: CSS grid layouts with responsive columns and gaps
- **Headline**: typography controls, h1-h6/p/span elements
- **Button**: links and call-to-action styling, icon support
- **Image**: lightweight image block with lazy loading
- **Query Loop**: dynamic post listings with template builder

## Hooks and Filters
- `generateblocks_css` - Filter generated CSS
- `generateblocks_attr_{block}` - Filter block attributes
- `generateblocks_query_loop_args` - Modify query arguments

## Best Practices
- Keep CSS output minimal; rely on the GenerateBlocks spacing system
- Use GeneratePress hooks when available
- Target specific block classes; avoid overriding core styles
- Design mobile-first and test on every device size

## Spacing Scale
0, 5, 10, 15, 20, 30, 40, 50, 60, 70, 80, 90, 100

## Accessibility
- Semantic HTML and a proper heading hierarchy
- Alt text for images
- Keyboard navigation and screen reader support
"""


TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="generate_gb_block",
        description="Generate GenerateBlocks-compatible block code",
        input_schema={
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": BLOCK_TYPES,
                    "description": "GenerateBlocks block type",
                },
                "attributes": {"type": "object", "description": "Block attributes"},
                "innerBlocks": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Inner block markup",
                },
            },
            "required": ["type"],
        },
        handler=generate_gb_block,
    ),
    ToolDescriptor(
        name="generate_gb_styles",
        description="Generate GenerateBlocks-specific CSS",
        input_schema={
            "type": "object",
            "properties": {
                "blockType": {
                    "type": "string",
                    "description": "Block type (container, grid, headline, etc.)",
                },
                "selector": {"type": "string", "description": "CSS selector"},
                "styles": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                    "description": "CSS properties and values",
                },
            },
            "required": ["blockType", "selector", "styles"],
        },
        handler=generate_gb_styles,
    ),
    ToolDescriptor(
        name="generate_gb_template",
        description="Generate GenerateBlocks template code",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Template name"},
                "description": {"type": "string", "description": "Template description"},
                "blocks": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {"type": "string", "description": "Block type"},
                            "attributes": {"type": "object", "description": "Block attributes"},
                        },
                        "required": ["type"],
                    },
                    "description": "Array of blocks in the template",
                },
            },
            "required": ["name", "blocks"],
        },
        handler=generate_gb_template,
    ),
    ToolDescriptor(
        name="get_generateblocks_guide",
        description="Get GenerateBlocks development guide and best practices",
        input_schema={"type": "object", "properties": {}},
        handler=get_generateblocks_guide,
    ),
]
