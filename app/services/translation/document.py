"""
Document capability interface used by the page substitutor.

Any page representation (a browser bridge, a parsed template, the in-memory
fake of the test-suite) can be localized as long as it provides these
operations.
"""

from typing import Iterable, Optional, Protocol


class PageElement(Protocol):
    """A node carrying a data-i18n marker."""

    @property
    def tag_name(self) -> str:
        """Upper-case tag name (INPUT, TEXTAREA, SPAN, ...)."""
        ...

    @property
    def child_element_count(self) -> int:
        """Number of element children; text nodes are not counted."""
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        ...

    def has_attribute(self, name: str) -> bool:
        ...

    def set_attribute(self, name: str, value: str) -> None:
        ...

    def set_value(self, value: str) -> None:
        """Set the current value of a form control."""
        ...

    def set_text_content(self, text: str) -> None:
        """Replace all children with a single text node."""
        ...


class PageDocument(Protocol):
    """The page being localized."""

    def query_marked(self, attribute: str) -> Iterable[PageElement]:
        """Elements carrying attribute, in document order."""
        ...

    def set_language(self, lang: str) -> None:
        """Set the language attribute of the root element."""
        ...

    def replace_body(self, html: str) -> None:
        """Replace the body content with raw markup."""
        ...
