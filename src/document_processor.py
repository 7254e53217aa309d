"""
Document Processor - Finds terminal output containers in an HTML document
and replaces their text with converted, colored markup
"""

import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ansi_to_html import AnsiToHtml
from escape_normalizer import has_ansi_codes

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Converts ANSI text inside document containers, once per container"""

    def __init__(self, converter: Optional[AnsiToHtml] = None,
                 container_tag: str = "pre", processed_class: str = "ansi-processed"):
        self.converter = converter or AnsiToHtml()
        self.container_tag = container_tag
        self.processed_class = processed_class

        # Containers already looked at, keyed by identity; holding the tag keeps the id stable
        self._handled: Dict[int, Tag] = {}

    def is_handled(self, container: Tag) -> bool:
        """Check whether a container was processed before"""
        if id(container) in self._handled:
            return True
        return self.processed_class in (container.get("class") or [])

    def process_container(self, container: Tag) -> bool:
        """Convert one container; returns True if its content was replaced"""
        if self.is_handled(container):
            return False

        self._handled[id(container)] = container
        raw_text = container.get_text()

        if not has_ansi_codes(raw_text):
            return False

        fragment = BeautifulSoup(self.converter.convert(raw_text), "html.parser")
        container.clear()
        for node in list(fragment.contents):
            container.append(node.extract())

        container["class"] = (container.get("class") or []) + [self.processed_class]
        logger.info(f"Processed terminal output in <{self.container_tag}> ({len(raw_text)} chars)")
        return True

    def process_soup(self, soup: BeautifulSoup) -> int:
        """Process every container not yet handled; safe to call again after changes"""
        converted = 0
        for container in soup.find_all(self.container_tag):
            # Nested containers are detached once an enclosing one is rewritten
            if not any(parent is soup for parent in container.parents):
                continue
            if self.process_container(container):
                converted += 1
        return converted

    def process_html(self, document: str) -> str:
        """Process an HTML document string and return the rewritten document"""
        soup = BeautifulSoup(document, "html.parser")
        converted = self.process_soup(soup)
        logger.debug(f"Converted {converted} container(s)")
        return str(soup)
