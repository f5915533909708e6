from __future__ import annotations
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator

# Insertion order matters: the substring fallback scans keys in this order.
DEFAULT_READINGS: dict[str, str] = {
    # surnames
    "田中": "たなか",
    "佐藤": "さとう",
    "鈴木": "すずき",
    "高橋": "たかはし",
    "伊藤": "いとう",
    "渡辺": "わたなべ",
    "山本": "やまもと",
    "中村": "なかむら",
    "小林": "こばやし",
    "加藤": "かとう",
    "吉田": "よしだ",
    "山田": "やまだ",
    "佐々木": "ささき",
    "山口": "やまぐち",
    "松本": "まつもと",
    "井上": "いのうえ",
    "木村": "きむら",
    "林": "はやし",
    "清水": "しみず",
    "山崎": "やまざき",
    "森": "もり",
    "池田": "いけだ",
    "橋本": "はしもと",
    "斎藤": "さいとう",
    "石川": "いしかわ",
    "前田": "まえだ",
    "藤田": "ふじた",
    "後藤": "ごとう",
    "岡田": "おかだ",
    "長谷川": "はせがわ",
    # given names
    "太郎": "たろう",
    "次郎": "じろう",
    "三郎": "さぶろう",
    "一郎": "いちろう",
    "花子": "はなこ",
    "美子": "よしこ",
    "和子": "かずこ",
    "幸子": "さちこ",
    "恵子": "けいこ",
    "裕子": "ゆうこ",
    "智子": "ともこ",
    "直子": "なおこ",
    "真由美": "まゆみ",
    "由美": "ゆみ",
    "美穂": "みほ",
    "麻衣": "まい",
    "愛": "あい",
    "翔": "しょう",
    "拓海": "たくみ",
    "健太": "けんた",
    "雄大": "ゆうだい",
    # company names and fragments
    "株式会社": "かぶしきがいしゃ",
    "有限会社": "ゆうげんがいしゃ",
    "合同会社": "ごうどうがいしゃ",
    "トヨタ": "とよた",
    "ホンダ": "ほんだ",
    "ソニー": "そにー",
    "パナソニック": "ぱなそにっく",
    "日立": "ひたち",
    "東芝": "とうしば",
    "富士通": "ふじつう",
    "キヤノン": "きやのん",
    "ニコン": "にこん",
    "任天堂": "にんてんどう",
    "セガ": "せが",
    "カプコン": "かぷこん",
    "スクウェア": "すくうぇあ",
    "楽天": "らくてん",
    "ソフトバンク": "そふとばんく",
    "ドコモ": "どこも",
    "KDDI": "けーでぃーでぃーあい",
    "三菱": "みつびし",
    "三井": "みつい",
    "住友": "すみとも",
    "野村": "のむら",
    "大和": "だいわ",
    "伊藤忠": "いとうちゅう",
    "丸紅": "まるべに",
    "双日": "そうじつ",
    "商船三井": "しょうせんみつい",
    "日本郵船": "にっぽんゆうせん",
    "JR": "じぇいあーる",
    "ANA": "えーえぬえー",
    "JAL": "じゃる",
    "NTT": "えぬてぃーてぃー",
    # more surnames
    "小川": "おがわ",
    "中島": "なかじま",
    "近藤": "こんどう",
    "村上": "むらかみ",
    "遠藤": "えんどう",
    "青木": "あおき",
    "坂本": "さかもと",
    "藤井": "ふじい",
    "西村": "にしむら",
    "福田": "ふくだ",
    "太田": "おおた",
    "三浦": "みうら",
    "藤原": "ふじわら",
    "岡本": "おかもと",
    "松田": "まつだ",
    "中川": "なかがわ",
    "中野": "なかの",
    "原田": "はらだ",
    "小野": "おの",
    "竹内": "たけうち",
    "金子": "かねこ",
    "和田": "わだ",
    "石井": "いしい",
    "上田": "うえだ",
    "斉藤": "さいとう",
    "齋藤": "さいとう",
    "渡邊": "わたなべ",
    "渡邉": "わたなべ",
    # more given names
    "大輔": "だいすけ",
    "翔太": "しょうた",
    "陽子": "ようこ",
    "健一": "けんいち",
    "久美子": "くみこ",
    "明美": "あけみ",
    "浩": "ひろし",
    "誠": "まこと",
    # more companies
    "電通": "でんつう",
    "博報堂": "はくほうどう",
    "リクルート": "りくるーと",
    "NEC": "えぬいーしー",
}


class ReadingDictionary(Mapping):
    """Read-only token -> hiragana reading table.

    Keeps the insertion order of the source mapping. Empty tokens and empty
    readings are rejected.
    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        data = dict(DEFAULT_READINGS if entries is None else entries)
        for token, reading in data.items():
            if not token:
                raise ValueError("dictionary token must not be empty")
            if not reading:
                raise ValueError(f"empty reading for {token!r}")
        self._data = MappingProxyType(data)

    def __getitem__(self, token: str) -> str:
        return self._data[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ReadingDictionary({len(self)} entries)"


@lru_cache(maxsize=1)
def default_dictionary() -> ReadingDictionary:
    """Return the compiled-in dictionary, built once per process."""
    return ReadingDictionary(DEFAULT_READINGS)
