"""BeautifulSoup-backed document implementation."""

from typing import Optional

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from ..exceptions import MarkupError
from .base import MarkupDocument

DEFAULT_PARSER = "html.parser"


class SoupDocument(MarkupDocument):
    """HTML document parsed with BeautifulSoup."""

    def __init__(self, html: str, parser: str = DEFAULT_PARSER):
        self.parser = parser
        try:
            self.soup = BeautifulSoup(html, parser)
        except ParserRejectedMarkup as e:
            raise MarkupError(f"Could not parse HTML: {e}") from e

    def find_first(self, selector: str, within: Optional[Tag] = None) -> Optional[Tag]:
        scope = within if within is not None else self.soup
        return scope.select_one(selector)

    def get_inner_markup(self, node: Tag) -> str:
        return node.decode_contents()

    def set_inner_markup(self, node: Tag, markup: str) -> None:
        try:
            fragment = BeautifulSoup(markup, self.parser)
        except ParserRejectedMarkup as e:
            raise MarkupError(f"Could not parse replacement markup: {e}") from e
        node.clear()
        for child in list(fragment.contents):
            node.append(child.extract())

    def serialize(self) -> str:
        return self.soup.decode()
