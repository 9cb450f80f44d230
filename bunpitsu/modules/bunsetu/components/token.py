from dataclasses import dataclass
from typing import Optional, Tuple

UNKNOWN_POS = "未知語"

# IPADIC feature layout
POS = 0
POS_DETAIL_1 = 1
POS_DETAIL_2 = 2
POS_DETAIL_3 = 3
CONJUGATION_TYPE = 4
CONJUGATION_FORM = 5
BASE_FORM = 6
READING = 7
PRONUNCIATION = 8


@dataclass(frozen=True)
class Token:
    """
    形態素解析の結果 1 トークン分

    surface はテキスト上の表層形、features は IPADIC と同じ並びの素性列。
    素性列の長さは辞書や未知語処理によって変わるので、どの位置も欠けている
    可能性がある。欠けた位置のアクセサは例外を出さず None (品詞のみ "未知語")
    を返す。
    whitespace は表層形の直後に続く空白で、判定ルールには使わず文節を組み立てる
    ときだけ連結する。
    """
    surface: str
    features: Tuple[str, ...] = ()
    whitespace: str = ""

    def _feature(self, index: int) -> Optional[str]:
        if index < len(self.features):
            return self.features[index]
        return None

    @property
    def pos(self) -> str:
        value = self._feature(POS)
        return value if value is not None else UNKNOWN_POS

    @property
    def pos_detail_1(self) -> Optional[str]:
        return self._feature(POS_DETAIL_1)

    @property
    def pos_detail_2(self) -> Optional[str]:
        return self._feature(POS_DETAIL_2)

    @property
    def pos_detail_3(self) -> Optional[str]:
        return self._feature(POS_DETAIL_3)

    @property
    def conjugation_type(self) -> Optional[str]:
        return self._feature(CONJUGATION_TYPE)

    @property
    def conjugation_form(self) -> Optional[str]:
        return self._feature(CONJUGATION_FORM)

    @property
    def base_form(self) -> Optional[str]:
        return self._feature(BASE_FORM)

    @property
    def reading(self) -> Optional[str]:
        return self._feature(READING)

    @property
    def pronunciation(self) -> Optional[str]:
        return self._feature(PRONUNCIATION)

    def describe(self) -> str:
        detail = f"・{self.pos_detail_1}" if self.pos_detail_1 else ""
        conj = ""
        if self.pos in ("動詞", "形容詞") and self.conjugation_form:
            conj = f"・{self.conjugation_form}"
        return f"「{self.surface}」{self.pos}{detail}{conj}"
