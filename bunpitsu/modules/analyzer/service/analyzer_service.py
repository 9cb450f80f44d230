import logging

from ..components.handle import AnalyzerHandle

logger = logging.getLogger(__name__)

ANALYZERS = ("janome", "ginza")


def _janome_factory():
    from ..components.janome_analyzer import JanomeAnalyzer
    return JanomeAnalyzer()


def _ginza_factory(model):
    def create():
        from ..components.ginza import GinzaAnalyzer
        return GinzaAnalyzer(model)
    return create


def build_analyzer_handle(config) -> AnalyzerHandle:
    name = config.get("analyzer", "janome")

    if name == "janome":
        factory = _janome_factory
    elif name == "ginza":
        factory = _ginza_factory(config.get("ginza_model", "ja_ginza"))
    else:
        raise ValueError(f"Unknown analyzer '{name}', expected one of {ANALYZERS}")

    logger.info(f"[Analyzer] Using '{name}' analyzer")
    return AnalyzerHandle(name, factory)
