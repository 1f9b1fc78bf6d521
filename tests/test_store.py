from markov_text.analytics.store import ModelStore


def test_get_or_insert_returns_same_table():
    s = ModelStore()
    t = s.get_or_insert("ab")
    t.update('c')
    assert s.get_or_insert("ab") is t
    assert s.get("ab") is t and len(s) == 1

def test_get_missing():
    s = ModelStore()
    assert s.get("zz") is None
    assert "zz" not in s
    assert s.first() is None

def test_first_is_insertion_order():
    s = ModelStore()
    for w in ("qr", "ab", "mn"):
        s.get_or_insert(w)
    assert s.first()[0] == "qr"
    assert s.windows() == ["qr", "ab", "mn"]
