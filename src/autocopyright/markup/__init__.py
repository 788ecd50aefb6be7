"""HTML document factory."""

from .base import MarkupDocument
from .soup import DEFAULT_PARSER, SoupDocument


def parse_document(html: str, parser: str = DEFAULT_PARSER) -> MarkupDocument:
    """Parse HTML text into a document the rewriter can query and mutate."""
    return SoupDocument(html, parser=parser)


__all__ = ["MarkupDocument", "SoupDocument", "parse_document"]
