import logging
from typing import List, Optional, Protocol

from bunpitsu.modules.analyzer.components.handle import AnalyzerHandle
from .assembler import assemble_phrases

logger = logging.getLogger(__name__)

SPLITTERS = ("bunsetsu", "characters")


class PhraseSplitter(Protocol):
    name: str

    def split_into_phrases(self, text: str) -> List[str]:
        ...


class BunsetsuSplitter:
    """Splits text into bunsetsu using the morphological analyzer and the boundary rules."""

    name = "bunsetsu"

    def __init__(self, analyzer: AnalyzerHandle):
        self.analyzer = analyzer

    def split_into_phrases(self, text: str) -> List[str]:
        if not text:
            return []

        tokens = self.analyzer.tokenize(text)
        for i, token in enumerate(tokens):
            logger.debug(f"[Bunsetu] [{i}]{token.describe()}")

        phrases = assemble_phrases(tokens)
        logger.debug(f"[Bunsetu] 最終結果: {phrases}")
        return phrases


class CharacterSplitter:
    """Degraded mode for environments without an analyzer: one phrase per character."""

    name = "characters"

    def split_into_phrases(self, text: str) -> List[str]:
        return list(text)


def build_splitter(name: str, analyzer: Optional[AnalyzerHandle] = None) -> PhraseSplitter:
    if name == "bunsetsu":
        if analyzer is None:
            raise ValueError("The bunsetsu splitter needs an analyzer")
        return BunsetsuSplitter(analyzer)
    if name == "characters":
        logger.warning("[Bunsetu] Character splitter selected; phrases are single characters")
        return CharacterSplitter()
    raise ValueError(f"Unknown splitter '{name}', expected one of {SPLITTERS}")
