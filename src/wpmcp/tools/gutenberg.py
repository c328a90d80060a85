"""
Gutenberg Tools — block, variation and pattern scaffolding

Tools:
  generate_gutenberg_block   — block.json, PHP registration, editor script, package.json
  generate_block_variation   — core/group variation registration
  generate_block_pattern     — pattern file plus register_block_pattern() call
  get_gutenberg_standards    — Block development standards reference
"""

import json
import re
from typing import Any, Dict, List

from wpmcp.server.registry import ToolDescriptor

FENCE = "```"


def _snake(slug: str) -> str:
    return slug.replace("-", "_")


def _slug(title: str, sep: str) -> str:
    return re.sub(r"\s+", sep, title.strip().lower())


def _tab_json(value: Any) -> str:
    return json.dumps(value, indent="\t", ensure_ascii=False)


def _php_str(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def generate_block(args: Dict[str, Any]) -> str:
    name = args["name"]
    title = args["title"]
    description = args.get("description") or ""
    category = args.get("category") or "common"
    icon = args.get("icon") or "block-default"
    keywords = args.get("keywords") or []
    fn = _snake(name)

    block_json = {
        "$schema": "https://schemas.wp.org/trunk/block.json",
        "apiVersion": 3,
        "name": f"custom/{name}",
        "version": "1.0.0",
        "title": title,
        "category": category,
        "icon": icon,
        "description": description,
        "keywords": keywords,
        "textdomain": "custom-blocks",
        "supports": args.get("supports") or {},
        "attributes": args.get("attributes") or {},
        "example": args.get("example") or {},
        "editorScript": "file:./index.js",
        "editorStyle": "file:./index.css",
        "style": "file:./style-index.css",
    }

    package_json = {
        "name": f"@custom/{name}",
        "version": "1.0.0",
        "description": description,
        "main": "build/index.js",
        "scripts": {
            "build": "wp-scripts build",
            "start": "wp-scripts start",
            "packages-update": "wp-scripts packages-update",
        },
        "dependencies": {
            "@wordpress/block-editor": "^12.0.0",
            "@wordpress/blocks": "^13.0.0",
            "@wordpress/i18n": "^5.0.0",
        },
        "devDependencies": {"@wordpress/scripts": "^27.0.0"},
    }

    registration_php = f"""<?php
/**
 * Register {title} Block
 *
 * {description or 'Custom Gutenberg block'}
 */
function register_{fn}_block() {{
	register_block_type( __DIR__ . '/build', array(
		'render_callback' => 'render_{fn}_block',
	) );
}}
add_action( 'init', 'register_{fn}_block' );

/**
 * Render {title} Block
 *
 * @param array  $attributes Block attributes.
 * @param string $content    Block content.
 * @return string Rendered block HTML.
 */
function render_{fn}_block( $attributes, $content ) {{
	$classes = isset( $attributes['className'] ) ? esc_attr( $attributes['className'] ) : '';

	$wrapper_attributes = get_block_wrapper_attributes( array(
		'class' => $classes,
	) );

	ob_start();
	?>
	<div <?php echo $wrapper_attributes; ?>>
		<?php echo wp_kses_post( $content ); ?>
	</div>
	<?php
	return ob_get_clean();
}}
"""

    editor_js = f"""import {{ registerBlockType }} from '@wordpress/blocks';
import {{ useBlockProps }} from '@wordpress/block-editor';
import {{ __ }} from '@wordpress/i18n';

import metadata from './block.json';

function Edit( {{ attributes, setAttributes }} ) {{
	const blockProps = useBlockProps();

	return (
		<div {{ ...blockProps }}>
			<p>{{ __( '{_php_str(title)} - Edit', 'custom-blocks' ) }}</p>
		</div>
	);
}}

function save() {{
	const blockProps = useBlockProps.save();

	return <div {{ ...blockProps }} />;
}}

registerBlockType( metadata.name, {{
	edit: Edit,
	save,
}} );
"""

    return f"""# {title} Block

## Block Registration (PHP)

{FENCE}php
{registration_php}{FENCE}

## block.json

{FENCE}json
{_tab_json(block_json)}
{FENCE}

## Editor Script (src/index.js)

{FENCE}javascript
{editor_js}{FENCE}

## package.json

{FENCE}json
{_tab_json(package_json)}
{FENCE}

## Installation

1. Create block directory: `blocks/{name}/`
2. Place block.json in the block directory
3. Create `src/` directory with index.js
4. Run `npm install` to install dependencies
5. Run `npm run build` to build the block
6. The block will be available in the Gutenberg editor
"""


def generate_block_variation(args: Dict[str, Any]) -> str:
    name = args["name"]
    title = args["title"]
    description = args.get("description") or ""
    attributes = args.get("attributes") or {}
    inner_blocks = args.get("innerBlocks") or []
    scope = args.get("scope") or ["block", "inserter"]
    block = args.get("block") or "core/group"

    variation_js = f"""wp.domReady( () => {{
	wp.blocks.registerBlockVariation( '{block}', {{
		name: '{name}',
		title: wp.i18n.__( '{_php_str(title)}', 'textdomain' ),
		description: wp.i18n.__( '{_php_str(description)}', 'textdomain' ),
		attributes: {json.dumps(attributes, ensure_ascii=False)},
		innerBlocks: {json.dumps(inner_blocks, ensure_ascii=False)},
		scope: {json.dumps(scope)},
	}} );
}} );
"""

    enqueue_php = f"""<?php
function enqueue_{_snake(name)}_variation() {{
	wp_enqueue_script(
		'{name}-variation',
		get_theme_file_uri( 'assets/js/{name}-variation.js' ),
		array( 'wp-blocks', 'wp-dom-ready', 'wp-i18n' ),
		'1.0.0',
		true
	);
}}
add_action( 'enqueue_block_editor_assets', 'enqueue_{_snake(name)}_variation' );
"""

    return f"""# {title} Block Variation

## Variation Script (assets/js/{name}-variation.js)

{FENCE}javascript
{variation_js}{FENCE}

## Enqueue (PHP)

{FENCE}php
{enqueue_php}{FENCE}

## Usage

This variation extends the {block} block with predefined attributes and inner blocks.
It will appear in the block inserter as "{title}".
"""


def generate_block_pattern(args: Dict[str, Any]) -> str:
    title = args["title"]
    content = args["content"]
    description = args.get("description") or ""
    categories = args.get("categories") or ["patterns"]
    keywords = args.get("keywords") or []
    viewport_width = args.get("viewportWidth", 1200)
    block_types = args.get("blockTypes") or []
    inserter = args.get("inserter", True)
    fn = _slug(title, "_")
    slug = _slug(title, "-")

    pattern_code = f"""<?php
/**
 * Title: {title}
 * Slug: custom/{slug}
 * Description: {description}
 * Categories: {', '.join(categories)}
 * Keywords: {', '.join(keywords)}
 * Viewport Width: {viewport_width}
 * Block Types: {', '.join(block_types) if block_types else 'all'}
 * Inserter: {'yes' if inserter else 'no'}
 */
?>
<!-- wp:group {{"layout":{{"type":"constrained"}}}} -->
<div class="wp-block-group">
	{content}
</div>
<!-- /wp:group -->
"""

    cats = ", ".join(f"'{c}'" for c in categories)
    kws = ", ".join(f"'{k}'" for k in keywords)

    return f"""# {title} Block Pattern

{FENCE}php
{pattern_code}{FENCE}

## Registration

Register this pattern in your theme's `functions.php` or a plugin:

{FENCE}php
function register_{fn}_pattern() {{
	register_block_pattern(
		'custom/{slug}',
		array(
			'title'       => __( '{_php_str(title)}', 'textdomain' ),
			'description' => __( '{_php_str(description)}', 'textdomain' ),
			'content'     => '{_php_str(content)}',
			'categories'  => array( {cats} ),
			'keywords'    => array( {kws} ),
		)
	);
}}
add_action( 'init', 'register_{fn}_pattern' );
{FENCE}
"""


def get_gutenberg_standards(args: Dict[str, Any]) -> str:
    return STANDARDS


STANDARDS = """# Gutenberg Block Development Standards

## Block Structure

### Required Files
- `block.json` - Block metadata and configuration
- `src/index.js` - Block registration and React components
- `build/` - Compiled block files (generated)

### Optional Files
- `src/style.scss` - Frontend and editor styles
- `src/editor.scss` - Editor-only styles
- `src/edit.js` / `src/save.js` - Split components

## block.json Configuration
- `apiVersion` - Block API version (use 3)
- `name` - namespace/block-name
- `title` - Human-readable block title
- `category` - text, media, design, widgets, theme, embed
- `supports`, `attributes`, `example`, `keywords`, `icon`

## React Components

### Edit Component
- Use `useBlockProps()` for wrapper attributes
- Use `@wordpress/block-editor` components
- Update attributes via `setAttributes`
- Translate strings with `@wordpress/i18n`

### Save Component
- Use `useBlockProps.save()`
- Return static markup only (no hooks)

## PHP Rendering
- Use `render_callback` (or `render` in block.json) for dynamic blocks
- Use `get_block_wrapper_attributes()` for the wrapper
- Sanitize attributes and escape all output

## Accessibility
- Proper ARIA labels
- Keyboard navigation support
- Color contrast compliance

## Testing
- Test in the editor and on the frontend
- Test with GeneratePress and GenerateBlocks active
- Test responsive behaviour
"""


TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="generate_gutenberg_block",
        description=(
            "Generate complete Gutenberg block code including block.json, "
            "PHP registration, and React components"
        ),
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": 'Block name (slug, e.g., "custom-card")'},
                "title": {"type": "string", "description": "Block title (display name)"},
                "description": {"type": "string", "description": "Block description"},
                "category": {
                    "type": "string",
                    "description": "Block category (text, media, design, widgets, theme, embed)",
                },
                "icon": {"type": "string", "description": "Dashicon name or icon identifier"},
                "keywords": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Search keywords for the block",
                },
                "supports": {"type": "object", "description": "block.json supports"},
                "attributes": {"type": "object", "description": "block.json attributes"},
            },
            "required": ["name", "title"],
        },
        handler=generate_block,
    ),
    ToolDescriptor(
        name="generate_block_variation",
        description="Generate a Gutenberg block variation",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Variation name (slug)"},
                "title": {"type": "string", "description": "Variation title"},
                "description": {"type": "string", "description": "Variation description"},
                "block": {"type": "string", "description": "Block to extend (default: core/group)"},
                "attributes": {"type": "object", "description": "Default attributes for the variation"},
                "innerBlocks": {"type": "array", "description": "Inner block templates"},
            },
            "required": ["name", "title"],
        },
        handler=generate_block_variation,
    ),
    ToolDescriptor(
        name="generate_block_pattern",
        description="Generate a Gutenberg block pattern",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Pattern title"},
                "description": {"type": "string", "description": "Pattern description"},
                "content": {"type": "string", "description": "Block markup content"},
                "categories": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Pattern categories",
                },
                "keywords": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Pattern keywords",
                },
            },
            "required": ["title", "content"],
        },
        handler=generate_block_pattern,
    ),
    ToolDescriptor(
        name="get_gutenberg_standards",
        description="Get Gutenberg block development standards and best practices",
        input_schema={"type": "object", "properties": {}},
        handler=get_gutenberg_standards,
    ),
]
