from hostkit.http.cookies import cookies_to_obj, obj_to_cookies


def test_obj_to_cookies_skips_falsy_values():
    assert obj_to_cookies({"a": "1", "b": "", "c": None, "d": 2}) == "a=1;d=2"


def test_cookies_to_obj():
    assert cookies_to_obj("a=1; b=2") == {"a": "1", "b": "2"}
    assert cookies_to_obj("token=abc=def") == {"token": "abc=def"}


def test_cookies_to_obj_empty():
    assert cookies_to_obj("") is None
    assert cookies_to_obj(None) is None
