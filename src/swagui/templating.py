"""Kida environment for the Swagger UI bootstrap page.

The environment is created once per process and is immutable
afterwards. The only template is ``index.html``, shipped inside the
package.
"""

from dataclasses import asdict
from functools import cache

from kida import Environment, PackageLoader
from kida.template import Markup

from swagui.config import Config, IndexContext

INDEX_TEMPLATE = "index.html"


@cache
def get_environment() -> Environment:
    """Return the shared kida Environment bound to swagui's templates."""
    return Environment(
        loader=PackageLoader("swagui", "templates"),
        autoescape=True,
    )


def index_context(config: Config) -> dict[str, str | Markup]:
    """Build the template context for *config*.

    Script-context values are pre-encoded JavaScript literals and are
    marked safe; ``title`` stays a plain string and is HTML-escaped.
    """
    view = IndexContext.from_config(config)
    return {
        name: value if name == "title" else Markup(value)
        for name, value in asdict(view).items()
    }


def render_index(config: Config, env: Environment | None = None) -> str:
    """Render the UI bootstrap page for *config*."""
    template = (env or get_environment()).get_template(INDEX_TEMPLATE)
    return template.render(index_context(config))
