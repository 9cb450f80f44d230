"""Hand-built IPADIC tokens and fake analyzers shared by the tests."""

from __future__ import annotations

from typing import Dict, List, Optional

from bunpitsu.modules.bunsetu.components.token import Token


def tok(surface: str, *features: str) -> Token:
    return Token(surface=surface, features=tuple(features))


# IPADIC 形式の素性: 品詞,細分類1,細分類2,細分類3,活用型,活用形,原形,読み,発音
LEXICON: Dict[str, Token] = {
    "猫": tok("猫", "名詞", "一般", "*", "*", "*", "*", "猫", "ネコ", "ネコ"),
    "が": tok("が", "助詞", "格助詞", "一般", "*", "*", "*", "が", "ガ", "ガ"),
    "走る": tok("走る", "動詞", "自立", "*", "*", "五段・ラ行", "基本形", "走る", "ハシル", "ハシル"),
    "。": tok("。", "記号", "句点", "*", "*", "*", "*", "。", "。", "。"),
    "本": tok("本", "名詞", "一般", "*", "*", "*", "*", "本", "ホン", "ホン"),
    "を": tok("を", "助詞", "格助詞", "一般", "*", "*", "*", "を", "ヲ", "ヲ"),
    "読ん": tok("読ん", "動詞", "自立", "*", "*", "五段・マ行", "連用タ接続", "読む", "ヨン", "ヨン"),
    "で": tok("で", "助詞", "接続助詞", "*", "*", "*", "*", "で", "デ", "デ"),
    "いる": tok("いる", "動詞", "非自立", "*", "*", "一段", "基本形", "いる", "イル", "イル"),
    "美しい": tok("美しい", "形容詞", "自立", "*", "*", "形容詞・イ段", "基本形", "美しい", "ウツクシイ", "ウツクシイ"),
    "（": tok("（", "記号", "括弧開", "*", "*", "*", "*", "（", "（", "（"),
    "）": tok("）", "記号", "括弧閉", "*", "*", "*", "*", "）", "）", "）"),
    "例": tok("例", "名詞", "一般", "*", "*", "*", "*", "例", "レイ", "レイ"),
}


class FakeAnalyzer:
    """Looks surfaces up in LEXICON; text is split on spaces."""

    name = "fake"

    def __init__(self, lexicon: Optional[Dict[str, Token]] = None):
        self.lexicon = lexicon or LEXICON
        self.calls: List[str] = []

    def tokenize(self, text: str) -> List[Token]:
        self.calls.append(text)
        return [self.lexicon[word] for word in text.split(" ") if word]


class BrokenAnalyzer:

    name = "broken"

    def tokenize(self, text: str) -> List[Token]:
        raise RuntimeError("dictionary is corrupted")
