# templating.py
# Jinja2 environment for the packaged code and prompt templates

from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

_env = Environment(  # nosec B701 - renders TypeScript and Markdown, not HTML
    loader=PackageLoader("appo_mcp", "templates"),
    undefined=StrictUndefined,
    keep_trailing_newline=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **context: Any) -> str:
    """Render a template from appo_mcp/templates, stripped of surrounding blank lines."""
    return _env.get_template(template_name).render(**context).strip("\n")
