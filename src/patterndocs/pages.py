"""HTML pages for the catalog and topic views."""

from html import escape

from patterndocs.core.catalog import Category
from patterndocs.core.renderer import RenderResult
from patterndocs.core.viewer import NavigationSelection

SITE_TITLE = "Design Patterns"

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 0 auto; max-width: 52rem; padding: 1rem; }
nav a { text-decoration: none; }
.catalog h2 { margin-top: 1.5rem; }
.catalog ul { list-style: none; padding-left: 0; }
.catalog li { margin: 0.25rem 0; }
article pre { overflow-x: auto; padding: 0.75rem; background: #f5f5f5; }
article[dir="rtl"] { text-align: right; }
"""

# Reloads the page when the document shown here changes on disk
_LIVE_RELOAD_SCRIPT = """
<script>
(function () {
  var proto = location.protocol === "https:" ? "wss:" : "ws:";
  var ws = new WebSocket(proto + "//" + location.host + "/ws/live-reload");
  ws.onmessage = function (event) {
    var data = JSON.parse(event.data);
    if (data.type === "reload" && data.path === location.pathname) {
      location.reload();
    }
  };
})();
</script>
"""


def _layout(title: str, body: str, *, live_reload: bool) -> str:
    script = _LIVE_RELOAD_SCRIPT if live_reload else ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f"<body>\n{body}\n{script}</body>\n"
        "</html>\n"
    )


def render_catalog_page(categories: tuple[Category, ...], *, live_reload: bool = False) -> str:
    """Render the topic list grouped by category."""
    sections = []
    for category in categories:
        links = "\n".join(
            f'<li><a href="{escape(pattern.url)}">{escape(pattern.name)}</a></li>'
            for pattern in category.patterns
        )
        sections.append(f"<section>\n<h2>{escape(category.name)}</h2>\n<ul>\n{links}\n</ul>\n</section>")

    body = f'<main class="catalog">\n<h1>{SITE_TITLE}</h1>\n' + "\n".join(sections) + "\n</main>"
    return _layout(SITE_TITLE, body, live_reload=live_reload)


def render_topic_page(
    selection: NavigationSelection,
    result: RenderResult,
    *,
    title: str | None = None,
    live_reload: bool = False,
) -> str:
    """Render a topic document.

    The article carries a dir attribute only when a direction was given.
    """
    page_title = title or result.title or selection.topic
    dir_attr = "" if selection.direction is None else f' dir="{escape(selection.direction)}"'
    body = (
        f'<nav><a href="/">&larr; {SITE_TITLE}</a></nav>\n'
        f'<article class="markdown-body"{dir_attr}>\n{result.html}</article>'
    )
    return _layout(f"{page_title} - {SITE_TITLE}", body, live_reload=live_reload)


def render_not_found_page(document_path: str) -> str:
    body = (
        f'<nav><a href="/">&larr; {SITE_TITLE}</a></nav>\n'
        f"<main><h1>Not found</h1><p>No document at <code>{escape(document_path)}</code>.</p></main>"
    )
    return _layout(f"Not found - {SITE_TITLE}", body, live_reload=False)
