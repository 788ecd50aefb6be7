"""Abstract base class for parsed HTML documents."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class MarkupDocument(ABC):
    """Minimal HTML document interface used by the rewriter.

    Nodes are opaque to callers: they are only ever handed back to the
    document that produced them.
    """

    @abstractmethod
    def find_first(self, selector: str, within: Optional[Any] = None) -> Optional[Any]:
        """Return the first node matching a CSS selector, or None.

        Args:
            selector: CSS selector to match.
            within: Restrict the search to descendants of this node.
        """

    @abstractmethod
    def get_inner_markup(self, node: Any) -> str:
        """Return the markup between the node's opening and closing tags."""

    @abstractmethod
    def set_inner_markup(self, node: Any, markup: str) -> None:
        """Replace the node's children with the parsed markup."""

    @abstractmethod
    def serialize(self) -> str:
        """Render the whole document back to HTML text."""
