import pytest

from unstd.ustring import (
    CapacityLimitError,
    EmptyStringError,
    UString,
    UStringError,
)


def test_new_holds_text_and_room_for_terminator():
    s = UString("hello")
    assert s.text == "hello"
    assert s.length == len("hello")
    assert s.capacity == s.length + 1


def test_new_empty_and_none():
    assert UString().text == ""
    assert UString(None).length == 0
    assert UString().capacity >= 1


def test_new_cut_at_nul():
    assert UString("ab\0cd").text == "ab"


def test_new_over_limit_raises():
    with pytest.raises(CapacityLimitError):
        UString("hello", limit=3)


def test_errors_are_value_errors():
    assert issubclass(CapacityLimitError, UStringError)
    with pytest.raises(ValueError):
        UString("").pop_char()


def test_set_grows_capacity_and_keeps_when_smaller():
    s = UString("ab")
    s.set("a longer text")
    assert s.text == "a longer text"
    big = s.capacity
    assert big >= s.length + 1
    s.set("x")
    assert s.text == "x"
    assert s.capacity == big


def test_set_limit_and_none():
    s = UString("ab", limit=4)
    with pytest.raises(CapacityLimitError):
        s.set("abcdef")
    assert s.text == "ab"
    with pytest.raises(TypeError):
        s.set(None)


def test_reset_and_clear():
    s = UString("hello world")
    cap = s.capacity
    s.clear()
    assert s.text == ""
    assert s.capacity == cap
    s.set("hello world")
    s.reset()
    assert s.length == 0
    assert s.capacity == UString().capacity


def test_equals():
    assert UString("abc").equals(UString("abc"))
    assert UString("abc").equals("abc")
    assert not UString("abc").equals("abd")
    assert not UString("abc").equals("abcd")
    assert UString().equals("")


def test_equals_one_empty_raises():
    with pytest.raises(EmptyStringError):
        UString("abc").equals("")
    with pytest.raises(EmptyStringError):
        UString().equals(UString("abc"))


def test_equals_ignorecase():
    assert UString("HeLLo").equals_ignorecase("hello")
    assert UString("abc").equals_ignorecase(UString("ABC"))
    assert not UString("abc").equals_ignorecase("abd")
    assert not UString("abc").equals_ignorecase("ABCD")


def test_char_edges():
    s = UString("Hello")
    assert s.startswith_char("H")
    assert not s.startswith_char("h")
    assert s.startswith_char_ignorecase("h")
    assert s.endswith_char("o")
    assert not s.endswith_char("O")
    assert s.endswith_char_ignorecase("O")


def test_char_edges_on_empty_raise():
    with pytest.raises(EmptyStringError):
        UString().startswith_char("a")
    with pytest.raises(EmptyStringError):
        UString().endswith_char_ignorecase("a")


def test_startswith_and_endswith():
    s = UString("hello world")
    assert s.startswith("hello")
    assert not s.startswith("world")
    assert s.endswith(UString("world"))
    assert not s.endswith("hello")
    assert not UString("hi").startswith("hello")
    assert UString().startswith("")


def test_startswith_one_empty_raises():
    with pytest.raises(EmptyStringError):
        UString("abc").startswith("")


def test_case_in_place():
    s = UString("MiXeD 123")
    s.to_lower()
    assert s.text == "mixed 123"
    s.to_upper()
    assert s.text == "MIXED 123"
    with pytest.raises(EmptyStringError):
        UString().to_lower()


def test_case_copies_leave_original():
    s = UString("MiXeD", limit=50)
    low = s.lower_copy()
    up = s.upper_copy()
    assert s.text == "MiXeD"
    assert low.text == "mixed"
    assert up.text == "MIXED"
    assert low.limit == s.limit
    with pytest.raises(EmptyStringError):
        UString().upper_copy()


def test_push_char_grows_by_one_when_full():
    s = UString("ab")
    before = s.capacity
    s.push_char("c")
    assert s.text == "abc"
    assert s.capacity == before + 1
    assert s.capacity >= s.length + 1


def test_push_char_respects_limit():
    s = UString("ab", limit=3)
    with pytest.raises(CapacityLimitError):
        s.push_char("c")
    assert s.text == "ab"


def test_push_str():
    s = UString("abc")
    s.push_str("def")
    assert s.text == "abc" + "def"
    assert s.capacity >= s.length + 1
    with pytest.raises(EmptyStringError):
        s.push_str("")
    with pytest.raises(TypeError):
        s.push_str(None)


def test_push_str_limit():
    s = UString("abc", limit=5)
    with pytest.raises(CapacityLimitError):
        s.push_str("def")


def test_pop_char_round_trip():
    s = UString("abc")
    cap = s.capacity
    s.push_char("d")
    assert s.pop_char() == "d"
    assert s.text == "abc"
    assert s.pop_char() == "c"
    assert s.capacity < cap + 1
    assert s.capacity >= s.length + 1
    with pytest.raises(EmptyStringError):
        UString().pop_char()


def test_substr():
    s = UString("hello world")
    assert s.substr(6).text == "world"
    assert s.substr(0, 5).text == "hello"
    assert s.substr(6, 100).text == "world"
    sub = s.substr(2, 3)
    assert sub.length == 3
    assert sub.capacity == sub.length + 1
    assert sub.limit == 0


def test_substr_errors():
    with pytest.raises(IndexError):
        UString("abc").substr(3)
    with pytest.raises(EmptyStringError):
        UString().substr(0)


def test_bad_char_argument():
    with pytest.raises(ValueError):
        UString("abc").push_char("xy")