from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

from bunpitsu.modules.bunsetu.components.token import Token

COUNTED_POS = {
    "名詞": "noun_count",
    "動詞": "verb_count",
    "形容詞": "adj_count",
    "助詞": "particle_count",
}


@dataclass(frozen=True)
class WordInfo:
    surface: str
    pos: str
    pos_detail: Optional[str] = None
    pronunciation: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class TextStats:
    char_count: int = 0
    token_count: int = 0
    noun_count: int = 0
    verb_count: int = 0
    adj_count: int = 0
    particle_count: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


def word_infos(tokens: Sequence[Token]) -> List[WordInfo]:
    return [
        WordInfo(
            surface=t.surface,
            pos=t.pos,
            pos_detail=t.pos_detail_1,
            pronunciation=t.pronunciation,
        )
        for t in tokens
    ]


def text_stats(text: str, tokens: Sequence[Token]) -> TextStats:
    counts = {field: 0 for field in COUNTED_POS.values()}
    for t in tokens:
        field = COUNTED_POS.get(t.pos)
        if field:
            counts[field] += 1

    return TextStats(char_count=len(text), token_count=len(tokens), **counts)
