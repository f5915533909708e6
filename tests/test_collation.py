from itertools import product

from kanasort.collation import (
    MISSING_WEIGHT,
    SYLLABLE_ORDER,
    UNKNOWN_WEIGHT,
    compare_entries,
    compare_keys,
    kana_weight,
    sort_records,
)
from kanasort.records import SortableRecord


def _sign(n):
    return (n > 0) - (n < 0)


def test_kana_weight_table():
    assert kana_weight('あ') == 0
    assert kana_weight('か') == 5
    assert kana_weight('が') == 10
    assert kana_weight('ん') == len(SYLLABLE_ORDER) - 1


def test_kana_weight_katakana_and_small_kana():
    assert kana_weight('ア') == kana_weight('あ')
    assert kana_weight('っ') == kana_weight('つ')
    assert kana_weight('ャ') == kana_weight('や')


def test_kana_weight_unknown_and_missing():
    assert kana_weight('A') == UNKNOWN_WEIGHT
    assert kana_weight('王') == UNKNOWN_WEIGHT
    assert kana_weight('') == MISSING_WEIGHT


def test_katakana_equals_hiragana():
    assert compare_entries(SortableRecord('タナカ'), SortableRecord('たなか')) == 0


def test_explicit_reading_used_for_comparison():
    a = SortableRecord('王', 'たなか')
    b = SortableRecord('田中')
    assert compare_entries(a, b) == 0


def test_voiced_row_after_base_row():
    assert compare_keys('こ', 'が') < 0
    assert compare_keys('か', 'が') < 0


def test_shorter_key_first():
    assert compare_keys('たなか', 'たなかや') < 0
    assert compare_keys('たなかや', 'たなか') > 0


def test_kana_before_latin():
    assert compare_keys('ん', 'a') < 0


def test_latin_ordered_by_code_point():
    assert compare_keys('apple', 'banana') < 0
    assert compare_keys('ab', 'b') < 0


def test_small_kana_sorts_with_full_size():
    assert compare_keys('きって', 'きと') < 0
    assert compare_keys('きって', 'きつね') < 0


def test_antisymmetric_and_transitive():
    keys = ['', 'あ', 'あい', 'か', 'が', 'がっこう', 'かめ', 'っ', 'つ',
            'smith', 'adams', '王', 'たなか たろう', 'たなか']
    for a, b in product(keys, repeat=2):
        assert _sign(compare_keys(a, b)) == -_sign(compare_keys(b, a))
    for a, b, c in product(keys, repeat=3):
        if compare_keys(a, b) <= 0 and compare_keys(b, c) <= 0:
            assert compare_keys(a, c) <= 0


def test_sort_records_order():
    names = ['渡辺', 'あおい', '佐藤', 'ガッコウ', 'かめ', 'Zeta', 'Alpha', '王']
    out = sort_records([SortableRecord(n) for n in names])
    assert [r.display_name for r in out] == [
        'あおい', 'かめ', 'ガッコウ', '佐藤', '渡辺', 'Alpha', 'Zeta', '王',
    ]


def test_sort_records_stable():
    first = {'name': 'たなか', 'id': 1}
    second = {'name': 'タナカ', 'id': 2}
    third = {'name': 'あ', 'id': 3}
    out = sort_records(
        [first, second, third],
        key=lambda rec: SortableRecord(rec['name']),
    )
    assert [r['id'] for r in out] == [3, 1, 2]
