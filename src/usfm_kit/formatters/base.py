# src/usfm_kit/formatters/base.py

from collections.abc import Sequence
from typing import Protocol

from usfm_kit.usfm.models import Document


class Formatter(Protocol):
    """Renders parsed documents to a single string.

    Formatters are stateless and never modify the documents.
    """

    name: str

    def format(self, documents: Sequence[Document]) -> str: ...
