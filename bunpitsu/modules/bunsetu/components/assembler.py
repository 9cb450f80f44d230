import logging
from typing import List, Sequence

from .rules import BoundaryRule, is_boundary
from .token import Token

logger = logging.getLogger(__name__)


def assemble_phrases(tokens: Sequence[Token], classify: BoundaryRule = is_boundary) -> List[str]:
    phrases = []
    current_phrase = ""
    last = len(tokens) - 1

    for i, token in enumerate(tokens):
        current_phrase += token.surface + token.whitespace

        if i < last:
            next_token = tokens[i + 1]
            boundary = classify(token, next_token)
            logger.debug(f"[Bunsetu] 境界判定: \"{token.surface}\" -> \"{next_token.surface}\" = {boundary}")

            if boundary and current_phrase:
                phrases.append(current_phrase)
                current_phrase = ""

    if current_phrase:
        phrases.append(current_phrase)

    logger.debug(f"[Bunsetu] {len(tokens)} tokens -> {len(phrases)} phrases")
    return phrases
