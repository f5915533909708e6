from kanasort.normalize import is_kana, normalize_kana, widen_kana


def test_normalize_katakana_to_hiragana():
    assert normalize_kana('タナカ') == 'たなか'


def test_normalize_keeps_other_scripts():
    assert normalize_kana('ソニー株式会社 Sony 2024') == 'そにー株式会社 Sony 2024'


def test_normalize_block_edges():
    assert normalize_kana('ァヴヶ') == 'ぁゔゖ'
    # iteration mark lies outside the converted block
    assert normalize_kana('ヽ') == 'ヽ'


def test_normalize_idempotent():
    samples = ['', 'タナカ', 'たなか', 'ガッコウ', '田中 太郎', 'Smith', 'ｶﾀｶﾅ']
    for s in samples:
        assert normalize_kana(normalize_kana(s)) == normalize_kana(s)


def test_normalize_none():
    assert normalize_kana(None) == ''


def test_widen_half_width_kana():
    assert widen_kana('ﾀﾅｶ') == 'タナカ'
    assert widen_kana('ｶﾞｯｺｳ') == 'ガッコウ'


def test_widen_keeps_ascii_and_digits():
    assert widen_kana('ABC 123') == 'ABC 123'


def test_is_kana():
    assert is_kana('たなか')
    assert is_kana('タナカ')
    assert is_kana('ソニー')
    assert is_kana('がっこう')


def test_is_kana_rejects_mixed():
    assert not is_kana('田中')
    assert not is_kana('たなか たろう')
    assert not is_kana('たなか1')
    assert not is_kana('abc')
    assert not is_kana('')
    assert not is_kana(None)
