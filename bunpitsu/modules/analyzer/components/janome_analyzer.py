from typing import List

from janome.tokenizer import Tokenizer

from bunpitsu.modules.bunsetu.components.token import Token


def token_from_janome(token) -> Token:
    features = token.part_of_speech.split(",")
    features.extend([
        token.infl_type,
        token.infl_form,
        token.base_form,
        token.reading,
        token.phonetic,
    ])
    return Token(surface=token.surface, features=tuple(features))


class JanomeAnalyzer:
    """IPADIC tokenizer. Feature order matches Token's layout as is."""

    name = "janome"

    def __init__(self):
        self.tokenizer = Tokenizer()

    def tokenize(self, text: str) -> List[Token]:
        if not text:
            return []
        return [token_from_janome(t) for t in self.tokenizer.tokenize(text)]
