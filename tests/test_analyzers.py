"""Tests for the Janome and GiNZA adapters."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from bunpitsu.modules.analyzer.components.handle import AnalyzerHandle
from bunpitsu.modules.bunsetu.components.splitters import BunsetsuSplitter


class FakeMorph:
    def __init__(self, values):
        self.values = values

    def get(self, field):
        return self.values.get(field, [])


def spacy_token(text, tag, lemma, inflection=None, reading=None, ws=""):
    values = {}
    if inflection:
        values["Inflection"] = [inflection]
    if reading:
        values["Reading"] = [reading]
    return SimpleNamespace(
        text=text,
        text_with_ws=text + ws,
        whitespace_=ws,
        tag_=tag,
        lemma_=lemma,
        morph=FakeMorph(values),
    )


def test_unidic_tags_are_mapped_to_ipadic() -> None:
    ginza = pytest.importorskip("bunpitsu.modules.analyzer.components.ginza")

    assert ginza.normalize_pos("補助記号-句点") == ["記号", "句点", "*", "*"]
    assert ginza.normalize_pos("動詞-非自立可能") == ["動詞", "非自立", "*", "*"]
    assert ginza.normalize_pos("接尾辞-名詞的-一般") == ["名詞", "接尾", "名詞的", "一般"]
    assert ginza.normalize_pos("助詞-準体助詞") == ["助詞", "連体化", "*", "*"]
    assert ginza.normalize_pos("名詞-固有名詞-地名-一般") == ["名詞", "固有名詞", "地名", "一般"]
    assert ginza.normalize_pos("形状詞-一般") == ["形容動詞", "一般", "*", "*"]
    assert ginza.normalize_pos("") == ["*", "*", "*", "*"]


def test_unidic_inflection_is_split_into_type_and_form() -> None:
    ginza = pytest.importorskip("bunpitsu.modules.analyzer.components.ginza")

    assert ginza.split_inflection("五段-マ行;連用形-撥音便") == ("五段-マ行", "連用タ接続")
    assert ginza.split_inflection("下一段-ア行;終止形-一般") == ("下一段-ア行", "終止形")
    assert ginza.split_inflection("五段-カ行;連用形-一般") == ("五段-カ行", "連用形")
    assert ginza.split_inflection(None) == ("*", "*")


def test_ginza_token_keeps_whitespace_and_features() -> None:
    ginza = pytest.importorskip("bunpitsu.modules.analyzer.components.ginza")

    token = ginza.token_from_ginza(
        spacy_token("読ん", "動詞-一般", "読む", "五段-マ行;連用形-撥音便", "ヨン", ws=" ")
    )
    assert token.surface == "読ん"
    assert token.whitespace == " "
    assert token.features == ("動詞", "一般", "*", "*", "五段-マ行", "連用タ接続", "読む", "ヨン", "ヨン")

    particle = ginza.token_from_ginza(spacy_token("が", "助詞-格助詞", "が", reading="ガ"))
    assert particle.pos == "助詞"
    assert particle.pos_detail_1 == "格助詞"
    assert particle.conjugation_form == "*"


def test_trailing_space_keeps_punctuation_boundary() -> None:
    ginza = pytest.importorskip("bunpitsu.modules.analyzer.components.ginza")
    from bunpitsu.modules.bunsetu.components.assembler import assemble_phrases

    raw = [
        spacy_token("走る", "動詞-一般", "走る", "五段-ラ行;終止形-一般", "ハシル"),
        spacy_token("。", "補助記号-句点", "。", ws=" "),
        spacy_token("猫", "名詞-普通名詞-一般", "猫", reading="ネコ"),
        spacy_token("が", "助詞-格助詞", "が", reading="ガ"),
    ]
    tokens = [ginza.token_from_ginza(t) for t in raw]

    phrases = assemble_phrases(tokens)
    assert phrases == ["走る", "。 ", "猫が"]
    assert "".join(phrases) == "".join(t.text_with_ws for t in raw)


def test_trailing_space_keeps_particle_rules() -> None:
    ginza = pytest.importorskip("bunpitsu.modules.analyzer.components.ginza")
    from bunpitsu.modules.bunsetu.components.rules import is_boundary

    no = ginza.token_from_ginza(spacy_token("の", "助詞-格助詞", "の", reading="ノ", ws=" "))
    verb = ginza.token_from_ginza(spacy_token("走る", "動詞-一般", "走る", "五段-ラ行;終止形-一般", "ハシル"))
    assert is_boundary(no, verb) is True


def test_janome_token_layout() -> None:
    janome_analyzer = pytest.importorskip("bunpitsu.modules.analyzer.components.janome_analyzer")

    raw = SimpleNamespace(
        surface="走る",
        part_of_speech="動詞,自立,*,*",
        infl_type="五段・ラ行",
        infl_form="基本形",
        base_form="走る",
        reading="ハシル",
        phonetic="ハシル",
    )
    token = janome_analyzer.token_from_janome(raw)
    assert token.pos == "動詞"
    assert token.conjugation_form == "基本形"
    assert token.base_form == "走る"
    assert token.pronunciation == "ハシル"


def test_janome_end_to_end() -> None:
    janome_analyzer = pytest.importorskip("bunpitsu.modules.analyzer.components.janome_analyzer")

    splitter = BunsetsuSplitter(AnalyzerHandle("janome", janome_analyzer.JanomeAnalyzer))
    assert splitter.split_into_phrases("猫が走る。") == ["猫が", "走る", "。"]

    text = "人間は文章を読む時、滑らかに文字を読んでいる訳ではなく、「１点を見つめる」という事を繰り返しています。"
    phrases = splitter.split_into_phrases(text)
    assert "".join(phrases) == text
    assert 1 < len(phrases) < len(text)
