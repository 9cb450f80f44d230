import asyncio
import logging

from ..components.stats import TextStats, text_stats, word_infos

logger = logging.getLogger(__name__)


def get_analyzer(request):
    analyzer = getattr(request.app.state, "analyzer", None)
    if analyzer is None:
        raise RuntimeError("Analyzer not configured")
    return analyzer


def analyze_words(text, analyzer):
    if not text:
        return []
    return word_infos(analyzer.tokenize(text))


def compute_stats(text, analyzer):
    if not text:
        return TextStats()
    tokens = analyzer.tokenize(text)
    stats = text_stats(text, tokens)
    logger.debug(f"[Stats] {stats}")
    return stats


async def analyze_words_service(text, request):
    return await asyncio.to_thread(analyze_words, text, get_analyzer(request))


async def text_stats_service(text, request):
    return await asyncio.to_thread(compute_stats, text, get_analyzer(request))
