import logging
import threading
from typing import Callable, List, Optional, Protocol

from bunpitsu.modules.bunsetu.components.token import Token

logger = logging.getLogger(__name__)


class AnalysisFailed(Exception):
    """The morphological analyzer could not be created or could not tokenize the text."""


class Analyzer(Protocol):
    name: str

    def tokenize(self, text: str) -> List[Token]:
        ...


class AnalyzerHandle:
    """
    Owns one analyzer instance, created on first use.

    The factory runs at most once per successful initialization, even when
    several threads ask for the analyzer at the same time. A failed
    initialization is reported as AnalysisFailed and leaves the handle empty,
    so the next call tries again.
    """

    def __init__(self, name: str, factory: Callable[[], Analyzer]):
        self.name = name
        self._factory = factory
        self._analyzer: Optional[Analyzer] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._analyzer is not None

    def get(self) -> Analyzer:
        analyzer = self._analyzer
        if analyzer is not None:
            return analyzer

        with self._lock:
            if self._analyzer is None:
                logger.info(f"[Analyzer] Initializing '{self.name}' analyzer")
                try:
                    self._analyzer = self._factory()
                except Exception as e:
                    logger.error(f"[Analyzer] Failed to initialize '{self.name}': {e}")
                    raise AnalysisFailed(f"failed to initialize analyzer '{self.name}': {e}") from e
                logger.info(f"[Analyzer] '{self.name}' analyzer ready")
            return self._analyzer

    def tokenize(self, text: str) -> List[Token]:
        analyzer = self.get()
        try:
            return analyzer.tokenize(text)
        except AnalysisFailed:
            raise
        except Exception as e:
            logger.error(f"[Analyzer] Tokenization failed: {e}")
            raise AnalysisFailed(f"morphological analysis failed: {e}") from e
