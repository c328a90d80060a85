"""
WordPress Utility Tools — common PHP code patterns

Tools:
  generate_php_function   — Documented PHP function with optional hook wiring
  generate_hook           — add_action / add_filter callback scaffold
  generate_shortcode      — add_shortcode implementation with sanitized atts
  generate_rest_endpoint  — register_rest_route with handler and permission callback
  format_for_wpcodebox    — Metadata docblock for any generated code
"""

from typing import Any, Dict, List

from wpmcp.server.registry import ToolDescriptor

FENCE = "```"

COMMON_ACTIONS = [
    ("init", "WordPress initialization"),
    ("wp_enqueue_scripts", "Enqueue scripts and styles"),
    ("admin_init", "Admin initialization"),
    ("save_post", "Post save"),
    ("wp_head", "Header output"),
    ("wp_footer", "Footer output"),
]

COMMON_FILTERS = [
    ("the_content", "Post content"),
    ("the_title", "Post title"),
    ("excerpt_length", "Excerpt length"),
    ("body_class", "Body classes"),
    ("post_class", "Post classes"),
]


def _indent(code: str, prefix: str = "\t") -> str:
    return "\n".join(f"{prefix}{line}" for line in code.split("\n"))


def _snake(slug: str) -> str:
    return slug.replace("-", "_")


def _hook_call(kind: str, hook: str, callback: str, priority: int, args: int) -> str:
    fn = "add_action" if kind == "action" else "add_filter"
    return f"{fn}( '{hook}', '{callback}', {priority}, {args} );"


def generate_php_function(args: Dict[str, Any]) -> str:
    name = args["name"]
    body = args["body"]
    description = args.get("description") or name
    parameters = args.get("parameters") or []
    return_type = args.get("returnType") or "void"
    hooks = args.get("hooks") or []

    param_parts = []
    for param in parameters:
        part = f"${param['name']}"
        if param.get("type"):
            part = f"{param['type']} {part}"
        if param.get("default") is not None:
            part += f" = {param['default']}"
        param_parts.append(part)
    param_list = ", ".join(param_parts)

    doc_lines = ["/**", f" * {description}", " *"]
    doc_lines += [
        f" * @param {p.get('type') or 'mixed'} ${p['name']} {p['name']}" for p in parameters
    ]
    doc_lines += [f" * @return {return_type}", " */"]

    function_code = "\n".join(doc_lines) + (
        f"\nfunction {name}( {param_list} ) {{\n{_indent(body)}\n}}"
    )
    hook_code = "\n".join(
        _hook_call(h.get("type", "action"), h["hook"], name, h.get("priority") or 10, h.get("args") or 1)
        for h in hooks
    )
    if hook_code:
        function_code += "\n\n" + hook_code
    call_args = ", ".join(f"${p['name']}" for p in parameters)

    return f"""# {name} Function

## Function Code

{FENCE}php
<?php
{function_code}
{FENCE}

## Usage

{FENCE}php
{name}( {call_args} );
{FENCE}

## Notes

- Function follows WordPress coding standards
- Parameters are properly typed
- Hooks are registered as specified
- Code is ready for WPCodebox
"""


def generate_hook(args: Dict[str, Any]) -> str:
    kind = args["type"]
    if kind not in ("action", "filter"):
        raise ValueError(f"Hook type must be 'action' or 'filter', got {kind!r}")
    hook = args["hook"]
    callback = args["callback"]
    priority = args.get("priority", 10)
    nargs = args.get("args", 1)
    title = kind.capitalize()
    description = args.get("description") or f"{title}: {hook}"

    arg_list = ", ".join(f"$arg{i + 1}" for i in range(nargs))
    body = "\t// Hook implementation\n"
    if kind == "filter":
        body += "\treturn $arg1;\n"

    hook_code = (
        "<?php\n"
        f"/**\n * {description}\n */\n"
        f"function {callback}( {arg_list} ) {{\n{body}}}\n"
        f"{_hook_call(kind, hook, callback, priority, nargs)}\n"
    )

    common = COMMON_ACTIONS if kind == "action" else COMMON_FILTERS
    common_list = "\n".join(f"- `{name}` - {desc}" for name, desc in common)

    return f"""# {hook} {title}

## Hook Code

{FENCE}php
{hook_code}{FENCE}

## Common {"Actions" if kind == "action" else "Filters"}

{common_list}

## Notes

- Priority: {priority} (lower = earlier execution)
- Arguments: {nargs}
- {"Must return a value" if kind == "filter" else "Does not return a value"}
"""


def generate_shortcode(args: Dict[str, Any]) -> str:
    tag = args["tag"]
    body = args["body"]
    description = args.get("description") or ""
    attributes = args.get("attributes") or []
    fn = f"{_snake(tag)}_shortcode"

    attr_docs = "\n".join(
        f" * - {a['name']}"
        + (f" (default: {a['default']})" if a.get("default") else "")
        + (f" - {a['description']}" if a.get("description") else "")
        for a in attributes
    )
    attr_defaults = "\n".join(
        f"\t\t'{a['name']}' => '{a.get('default') or ''}'," for a in attributes
    )
    attr_sanitize = "\n".join(
        f"\t$atts['{a['name']}'] = sanitize_text_field( $atts['{a['name']}'] );" for a in attributes
    )

    shortcode_code = f"""<?php
/**
 * Shortcode: [{tag}]
 *
 * {description}
 *
 * Attributes:
{attr_docs}
 */
function {fn}( $atts, $content = '' ) {{
	// Parse attributes
	$atts = shortcode_atts( array(
{attr_defaults}
	), $atts, '{tag}' );

	// Sanitize attributes
{attr_sanitize}

	// Process content
	$content = do_shortcode( $content );

	// Build output
	ob_start();
	?>
{_indent(body)}
	<?php
	return ob_get_clean();
}}
add_shortcode( '{tag}', '{fn}' );
"""

    usage_attrs = "".join(f' {a["name"]}="{a.get("default") or ""}"' for a in attributes)
    example_attr = f' {attributes[0]["name"]}="example"' if attributes else ""

    return f"""# [{tag}] Shortcode

## Shortcode Code

{FENCE}php
{shortcode_code}{FENCE}

## Usage

{FENCE}php
[{tag}{usage_attrs}]
{FENCE}

## Example

{FENCE}html
[{tag}{example_attr}]
Content here
[/{tag}]
{FENCE}

## Notes

- Attributes are sanitized
- Content is processed through do_shortcode()
- Output is escaped
- Ready for WPCodebox
"""


def generate_rest_endpoint(args: Dict[str, Any]) -> str:
    namespace = args["namespace"]
    route = args["route"].lstrip("/")
    callback = args["callback"]
    method = args.get("method") or "GET"
    description = args.get("description") or ""
    parameters = args.get("parameters") or []

    arg_specs = "\n".join(
        f"""\t\t\t'{p['name']}' => array(
\t\t\t\t'required'          => {'true' if p.get('required') else 'false'},
\t\t\t\t'type'              => '{p.get('type') or 'string'}',
\t\t\t\t'description'       => '{p.get('description') or p['name']}',
\t\t\t\t'sanitize_callback' => 'sanitize_text_field',
\t\t\t),"""
        for p in parameters
    )
    param_reads = "\n".join(
        f"\t${p['name']} = $request->get_param( '{p['name']}' );" for p in parameters
    )

    endpoint_code = f"""<?php
/**
 * REST API Endpoint: {namespace}/{route}
 *
 * Method: {method}
 * {description}
 */
function register_{callback}_endpoint() {{
	register_rest_route( '{namespace}', '/{route}', array(
		'methods'             => '{method}',
		'callback'            => '{callback}_handler',
		'permission_callback' => '{callback}_permission',
		'args'                => array(
{arg_specs}
		),
	) );
}}
add_action( 'rest_api_init', 'register_{callback}_endpoint' );

/**
 * Endpoint handler
 */
function {callback}_handler( $request ) {{
	// Get parameters
{param_reads}

	$response = array(
		'success' => true,
		'data'    => array(),
	);

	return new WP_REST_Response( $response, 200 );
}}

/**
 * Permission callback
 */
function {callback}_permission( $request ) {{
	return current_user_can( 'manage_options' );
}}
"""

    query = ""
    if parameters:
        query = "?" + "&".join(f"{p['name']}=value" for p in parameters)

    return f"""# REST API Endpoint: {namespace}/{route}

## Endpoint Code

{FENCE}php
{endpoint_code}{FENCE}

## Usage

{FENCE}javascript
fetch( '/wp-json/{namespace}/{route}{query}', {{
	method: '{method}',
	headers: {{
		'Content-Type': 'application/json',
		'X-WP-Nonce': wpApiSettings.nonce,
	}},
}} )
	.then( response => response.json() )
	.then( data => console.log( data ) );
{FENCE}

## Notes

- Endpoint is registered on `rest_api_init`
- Parameters are sanitized
- Permission callback checks user capabilities
- Ready for WPCodebox
"""


def format_for_wpcodebox(args: Dict[str, Any]) -> str:
    tags = args.get("tags") or []
    return (
        "/**\n"
        f" * {args['title']}\n"
        " *\n"
        f" * {args.get('description') or ''}\n"
        " *\n"
        f" * Language: {args['language'].upper()}\n"
        f" * Tags: {', '.join(tags) if tags else 'none'}\n"
        " */\n\n"
        f"{args['code']}"
    )


TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="generate_php_function",
        description="Generate WordPress PHP function following coding standards",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Function name"},
                "description": {"type": "string", "description": "Function description"},
                "parameters": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "type": {"type": "string"},
                            "default": {"type": "string"},
                        },
                        "required": ["name"],
                    },
                    "description": "Function parameters",
                },
                "returnType": {"type": "string", "description": "Return type"},
                "body": {"type": "string", "description": "Function body code"},
                "hooks": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {"type": "string", "enum": ["action", "filter"]},
                            "hook": {"type": "string"},
                            "priority": {"type": "number"},
                            "args": {"type": "number"},
                        },
                        "required": ["hook"],
                    },
                    "description": "Hooks to register",
                },
            },
            "required": ["name", "body"],
        },
        handler=generate_php_function,
    ),
    ToolDescriptor(
        name="generate_hook",
        description="Generate WordPress action or filter hook code",
        input_schema={
            "type": "object",
            "properties": {
                "type": {"type": "string", "enum": ["action", "filter"], "description": "Hook type"},
                "hook": {"type": "string", "description": "Hook name"},
                "callback": {"type": "string", "description": "Callback function name"},
                "priority": {"type": "number", "description": "Hook priority (default: 10)"},
                "args": {"type": "number", "description": "Number of arguments (default: 1)"},
                "description": {"type": "string", "description": "Hook description"},
            },
            "required": ["type", "hook", "callback"],
        },
        handler=generate_hook,
    ),
    ToolDescriptor(
        name="generate_shortcode",
        description="Generate WordPress shortcode implementation",
        input_schema={
            "type": "object",
            "properties": {
                "tag": {"type": "string", "description": "Shortcode tag"},
                "description": {"type": "string", "description": "Shortcode description"},
                "attributes": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "default": {"type": "string"},
                            "description": {"type": "string"},
                        },
                        "required": ["name"],
                    },
                    "description": "Shortcode attributes",
                },
                "body": {"type": "string", "description": "Shortcode body code"},
            },
            "required": ["tag", "body"],
        },
        handler=generate_shortcode,
    ),
    ToolDescriptor(
        name="generate_rest_endpoint",
        description="Generate WordPress REST API endpoint",
        input_schema={
            "type": "object",
            "properties": {
                "namespace": {"type": "string", "description": "REST API namespace"},
                "route": {"type": "string", "description": "Route path"},
                "method": {
                    "type": "string",
                    "enum": ["GET", "POST", "PUT", "DELETE"],
                    "description": "HTTP method",
                },
                "description": {"type": "string", "description": "Endpoint description"},
                "parameters": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "type": {"type": "string"},
                            "required": {"type": "boolean"},
                            "description": {"type": "string"},
                        },
                        "required": ["name"],
                    },
                    "description": "Endpoint parameters",
                },
                "callback": {"type": "string", "description": "Callback function name"},
            },
            "required": ["namespace", "route", "callback"],
        },
        handler=generate_rest_endpoint,
    ),
    ToolDescriptor(
        name="format_for_wpcodebox",
        description="Format any generated code for WPCodebox snippet structure",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Snippet title"},
                "code": {"type": "string", "description": "Code to format"},
                "language": {
                    "type": "string",
                    "enum": ["php", "javascript", "css"],
                    "description": "Programming language",
                },
                "description": {"type": "string", "description": "Snippet description"},
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Tags for organization",
                },
            },
            "required": ["title", "code", "language"],
        },
        handler=format_for_wpcodebox,
    ),
]
