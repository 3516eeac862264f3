from abc import ABC, abstractmethod

from ..parser import Document


class BaseExtractor(ABC):
    """Base class for page extractors."""

    page: str = ""

    @abstractmethod
    def extract(self, doc: Document, raw_html: str = ""):
        ...
