"""
文節境界の判定ルール

隣り合う 2 トークン (current, next) を受け取り、current の直後で文節を
区切るかどうかを返す。判定は current の品詞で振り分け、品詞ごとに 1 つの
純粋関数が受け持つ。どのルールにも当てはまらない場合は「区切らない」。
"""
from typing import Callable, Dict

from .categories import ConjugationForm, PartOfSpeech
from .token import Token

BoundaryRule = Callable[[Token, Token], bool]

SENTENCE_PUNCTUATION = frozenset({"、", "。", "！", "？", "…"})
CLOSING_BRACKETS = frozenset({"」", "』", "）", "】"})
OPENING_BRACKETS = frozenset({"「", "『", "（", "【"})

# 引用の「と」に続いても区切らない動詞
QUOTATION_VERBS = frozenset({"いう", "言う", "思う", "考える", "する", "なる"})

DEPENDENT = "非自立"
PROPER_NOUN = "固有名詞"
SUFFIX_USAGE = "接尾"

ASPECT_AUXILIARIES = frozenset({"いる", "ある", "おる"})
NEGATIVE_AUXILIARIES = frozenset({"ない", "ぬ", "ん"})
DESIDERATIVE_AUXILIARIES = frozenset({"たい", "たがる"})
VOICE_AUXILIARIES = frozenset({"れる", "られる", "せる", "させる"})
NEGATIVE_FOLLOWERS = frozenset({"で", "か", "の"})


def _category(token: Token) -> PartOfSpeech:
    return PartOfSpeech.from_label(token.pos)


def symbol_boundary(current: Token, next_token: Token) -> bool:
    if current.surface in SENTENCE_PUNCTUATION:
        return True
    if current.surface in CLOSING_BRACKETS:
        return True
    # 開き括弧は後ろの語にくっつける
    return False


def particle_boundary(current: Token, next_token: Token) -> bool:
    detail = current.pos_detail_1 or ""
    text = current.surface
    next_pos = _category(next_token)

    if detail == "格助詞":
        if text == "の":
            # 連体修飾の「の」は区切らないが、用言が続くなら区切る
            return next_pos.is_predicate or next_pos is PartOfSpeech.AUXILIARY
        if text == "と":
            return next_token.base_form not in QUOTATION_VERBS
        return True

    if detail in ("係助詞", "副助詞"):
        return True

    if detail == "接続助詞":
        if text in ("て", "で"):
            if next_pos is PartOfSpeech.AUXILIARY:
                return False
            if next_pos is PartOfSpeech.VERB:
                # 「〜ている」「〜てしまう」のような補助動詞は前に続ける
                return next_token.pos_detail_1 != DEPENDENT
        return True

    if detail == "終助詞":
        return True
    if detail == "連体化":
        return False
    if detail == "並立助詞":
        return True

    # 助詞・助動詞が連続する場合はひと続きにする
    return next_pos not in (PartOfSpeech.PARTICLE, PartOfSpeech.AUXILIARY)


def predicate_boundary(current: Token, next_token: Token) -> bool:
    form = ConjugationForm.from_label(current.conjugation_form)
    next_pos = _category(next_token)

    if form is ConjugationForm.TERMINAL:
        return next_pos not in (PartOfSpeech.AUXILIARY, PartOfSpeech.PARTICLE)
    if form is ConjugationForm.ATTRIBUTIVE:
        return False
    if form is ConjugationForm.CONTINUATIVE:
        if next_pos is PartOfSpeech.AUXILIARY:
            return False
        if next_pos is PartOfSpeech.VERB:
            # 複合動詞
            return next_token.pos_detail_1 != DEPENDENT
        return True
    if form is ConjugationForm.CONDITIONAL:
        return next_pos is PartOfSpeech.PARTICLE
    if form is ConjugationForm.IMPERATIVE:
        return True
    return False


def auxiliary_boundary(current: Token, next_token: Token) -> bool:
    text = current.surface
    next_pos = _category(next_token)
    before_particle_or_symbol = next_pos in (PartOfSpeech.PARTICLE, PartOfSpeech.SYMBOL)

    if text in ASPECT_AUXILIARIES:
        return before_particle_or_symbol
    if text in NEGATIVE_AUXILIARIES:
        if next_pos is PartOfSpeech.PARTICLE:
            # 「〜ないで」「〜ないから」「〜ないの」
            return next_token.surface[:1] in NEGATIVE_FOLLOWERS
        return next_pos is PartOfSpeech.SYMBOL
    if text in DESIDERATIVE_AUXILIARIES:
        return before_particle_or_symbol
    if text in VOICE_AUXILIARIES:
        return next_pos is not PartOfSpeech.AUXILIARY
    return before_particle_or_symbol


def noun_boundary(current: Token, next_token: Token) -> bool:
    next_pos = _category(next_token)

    if next_pos in (PartOfSpeech.PARTICLE, PartOfSpeech.SUFFIX):
        return False
    if next_pos is PartOfSpeech.NOUN:
        if current.pos_detail_1 != PROPER_NOUN:
            # 複合名詞
            return False
        return next_token.pos_detail_1 not in (SUFFIX_USAGE, DEPENDENT)
    return False


def adverb_boundary(current: Token, next_token: Token) -> bool:
    return _category(next_token) is not PartOfSpeech.PARTICLE


def always_boundary(current: Token, next_token: Token) -> bool:
    return True


def never_boundary(current: Token, next_token: Token) -> bool:
    return False


RULES: Dict[PartOfSpeech, BoundaryRule] = {
    PartOfSpeech.SYMBOL: symbol_boundary,
    PartOfSpeech.PARTICLE: particle_boundary,
    PartOfSpeech.VERB: predicate_boundary,
    PartOfSpeech.ADJECTIVE: predicate_boundary,
    PartOfSpeech.ADJECTIVAL_NOUN: predicate_boundary,
    PartOfSpeech.AUXILIARY: auxiliary_boundary,
    PartOfSpeech.CONJUNCTION: always_boundary,
    PartOfSpeech.INTERJECTION: always_boundary,
    PartOfSpeech.PREFIX: never_boundary,
    PartOfSpeech.NOUN: noun_boundary,
    PartOfSpeech.ADVERB: adverb_boundary,
    PartOfSpeech.ADNOMINAL: never_boundary,
    PartOfSpeech.SUFFIX: never_boundary,
    PartOfSpeech.UNKNOWN: never_boundary,
    PartOfSpeech.OTHER: never_boundary,
}

_missing = set(PartOfSpeech) - set(RULES)
if _missing:
    raise RuntimeError(f"No boundary rule for: {sorted(m.name for m in _missing)}")


def is_boundary(current: Token, next_token: Token) -> bool:
    return RULES[_category(current)](current, next_token)
