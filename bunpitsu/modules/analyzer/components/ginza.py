from typing import List, Tuple

import spacy

from bunpitsu.modules.bunsetu.components.token import Token

# UniDic の品詞大分類を IPADIC の体系に寄せる
POS_HEAD_MAP = {
    "補助記号": ["記号"],
    "空白": ["記号", "空白"],
    "形状詞": ["形容動詞"],
    "接頭辞": ["接頭詞"],
    "代名詞": ["名詞", "代名詞"],
    "接尾辞": ["名詞", "接尾"],
}

POS_DETAIL_MAP = {
    "非自立可能": "非自立",
    "準体助詞": "連体化",
}


def normalize_pos(tag):
    parts = tag.split("-") if tag else []
    if not parts:
        return ["*", "*", "*", "*"]

    head, rest = parts[0], parts[1:]
    pos = list(POS_HEAD_MAP.get(head, [head]))
    pos.extend(POS_DETAIL_MAP.get(p, p) for p in rest)

    pos = pos[:4]
    while len(pos) < 4:
        pos.append("*")
    return pos


def split_inflection(inflection) -> Tuple[str, str]:
    if not inflection:
        return "*", "*"

    conj_type, _, form = inflection.partition(";")
    if not form:
        return conj_type or "*", "*"

    form_head = form.split("-")[0]
    if form_head == "連用形" and "音便" in form:
        # IPADIC の「連用タ接続」にあたる
        return conj_type, "連用タ接続"
    return conj_type, form_head


def _morph_value(token, field):
    values = token.morph.get(field)
    if not values:
        return None
    return ",".join(values)


def token_from_ginza(token) -> Token:
    conj_type, conj_form = split_inflection(_morph_value(token, "Inflection"))
    reading = _morph_value(token, "Reading") or "*"

    features = normalize_pos(token.tag_)
    features.extend([
        conj_type,
        conj_form,
        token.lemma_ or token.text,
        reading,
        reading,
    ])
    # 後続の空白は surface ではなく whitespace に持たせる
    return Token(surface=token.text, features=tuple(features), whitespace=token.whitespace_)


class GinzaAnalyzer:

    name = "ginza"

    def __init__(self, model="ja_ginza"):
        self.model = model
        self.nlp = spacy.load(model)

    def tokenize(self, text: str) -> List[Token]:
        if not text:
            return []
        doc = self.nlp(text)
        return [token_from_ginza(t) for t in doc]
