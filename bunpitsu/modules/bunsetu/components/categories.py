from enum import Enum
from typing import Optional


class PartOfSpeech(Enum):
    NOUN = "名詞"
    PARTICLE = "助詞"
    VERB = "動詞"
    ADJECTIVE = "形容詞"
    ADJECTIVAL_NOUN = "形容動詞"
    AUXILIARY = "助動詞"
    SYMBOL = "記号"
    CONJUNCTION = "接続詞"
    INTERJECTION = "感動詞"
    PREFIX = "接頭詞"
    SUFFIX = "接尾詞"
    ADVERB = "副詞"
    ADNOMINAL = "連体詞"
    UNKNOWN = "未知語"
    OTHER = "その他"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "PartOfSpeech":
        if label is None:
            return cls.UNKNOWN
        return _POS_BY_LABEL.get(label, cls.OTHER)

    @property
    def is_predicate(self) -> bool:
        return self in PREDICATES


_POS_BY_LABEL = {member.value: member for member in PartOfSpeech if member is not PartOfSpeech.OTHER}

PREDICATES = frozenset({
    PartOfSpeech.VERB,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADJECTIVAL_NOUN,
})


class ConjugationForm(Enum):
    TERMINAL = "終止形"
    ATTRIBUTIVE = "連体形"
    CONTINUATIVE = "連用形"
    CONDITIONAL = "仮定形"
    IMPERATIVE = "命令形"
    OTHER = "その他"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "ConjugationForm":
        if label is None:
            return cls.OTHER
        return _FORM_BY_LABEL.get(label, cls.OTHER)


_FORM_BY_LABEL = {
    # IPADIC は終止形を「基本形」と呼ぶ
    "基本形": ConjugationForm.TERMINAL,
    "終止形": ConjugationForm.TERMINAL,
    "連体形": ConjugationForm.ATTRIBUTIVE,
    "連用形": ConjugationForm.CONTINUATIVE,
    "仮定形": ConjugationForm.CONDITIONAL,
    "命令形": ConjugationForm.IMPERATIVE,
    "命令ｅ": ConjugationForm.IMPERATIVE,
    "命令ｒｏ": ConjugationForm.IMPERATIVE,
    "命令ｙｏ": ConjugationForm.IMPERATIVE,
    "命令ｉ": ConjugationForm.IMPERATIVE,
}
