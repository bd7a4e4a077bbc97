"""Markdown renderer factory.

Comment bodies come from anonymous visitors, so the renderer only produces
inline/block markup: raw HTML is escaped and links, autolinks and images are
left as literal text.
"""

from markdown_it import MarkdownIt

DISABLED_RULES = ["image", "link", "autolink"]


def create_markdown_renderer() -> MarkdownIt:
    """Build the shared comment renderer.

    The instance is configured once and never mutated afterwards, so it is
    safe to share across requests.

    Returns:
        Configured MarkdownIt instance
    """
    return MarkdownIt("commonmark", {"html": False}).disable(DISABLED_RULES)
