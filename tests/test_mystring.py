import pytest

from polystring.fieldinfo import string_field_info
from polystring.mystring import ByteString


@pytest.mark.parametrize(
    "text,length",
    [
        ("Hello", 5),
        ("привет", 12),
        ("😀🎉", 8),
        ("Hi привет 😀", 20),
        ("", 0),
    ],
)
def test_create_length(text, length):
    assert len(ByteString(text)) == length


def test_create_none_rejected():
    with pytest.raises(TypeError):
        ByteString(None)


def test_create_from_bytes():
    assert ByteString(b"Hi").to_bytes() == b"Hi"


def test_create_stops_at_nul():
    assert ByteString(b"ab\0cd").to_bytes() == b"ab"


def test_length():
    assert len(ByteString("Hi")) == 2
    assert len(ByteString("привет")) == 12
    assert len(ByteString("")) == 0


def test_char_at_latin():
    s = ByteString("ABC")
    assert s.char_at(0) == ord("A")
    assert s.char_at(1) == ord("B")
    assert s.char_at(2) == ord("C")


def test_char_at_multibyte():
    assert ByteString("привет").char_at(0) == 0xD0
    assert ByteString("😀").char_at(0) == 0xF0


def test_char_at_invalid_index():
    with pytest.raises(IndexError):
        ByteString("ABC").char_at(999)


def test_concat_latin():
    result = ByteString("Hello").concat(ByteString(" World"))
    assert result.to_bytes() == b"Hello World"
    assert isinstance(result, ByteString)


def test_concat_russian():
    result = ByteString("привет").concat(ByteString(" мир"))
    assert len(result) == 19
    assert str(result) == "привет мир"


def test_concat_mixed():
    result = ByteString("Hello ").concat(ByteString("привет"))
    assert len(result) == 18


def test_concat_none_rejected():
    with pytest.raises(TypeError):
        ByteString("Hello").concat(None)


def test_substring_latin():
    sub = ByteString("Hello World").substring(0, 5)
    assert sub.to_bytes() == b"Hello"
    assert isinstance(sub, ByteString)


def test_substring_russian_bytes():
    sub = ByteString("привет мир").substring(0, 6)
    assert str(sub) == "при"


def test_empty_substring():
    assert len(ByteString("Hello World").substring(3, 3)) == 0


@pytest.mark.parametrize("start,end", [(100, 200), (5, 3)])
def test_substring_invalid(start, end):
    with pytest.raises(ValueError):
        ByteString("Hello World").substring(start, end)


def test_substring_split_character_renders_replacement():
    assert str(ByteString("привет").substring(0, 1)) == "\ufffd"


@pytest.mark.parametrize(
    "text,delimiters,words",
    [
        ("Hello world from C", " ", ["Hello", "world", "from", "C"]),
        ("привет мир из C", " ", ["привет", "мир", "из", "C"]),
        ("one,two;three:four", ",;:", ["one", "two", "three", "four"]),
        ("  hello  world  ", " ", ["hello", "world"]),
        ("", " ", []),
    ],
)
def test_split(text, delimiters, words):
    result = ByteString(text).split(delimiters)
    assert len(result) == len(words)
    assert [str(word) for word in result] == words
    assert result.field is string_field_info()


def test_split_without_delimiters_in_text():
    result = ByteString("abc").split(",")
    assert [w.to_bytes() for w in result] == [b"abc"]


def test_split_none_delimiters_rejected():
    with pytest.raises(TypeError):
        ByteString("Hello").split(None)


def test_to_bytes():
    assert ByteString("Hello").to_bytes() == b"Hello"
    assert ByteString("привет").to_bytes() == "привет".encode("utf-8")
    assert ByteString("😀").to_bytes() == "😀".encode("utf-8")


def test_str_round_trip():
    for text in ("Hello", "привет", "😀🎉", "Hi привет 😀"):
        assert str(ByteString(text)) == text


def test_appending_changes_string():
    s = ByteString("Hi")
    s.append(ord("!"))
    assert s.to_bytes() == b"Hi!"