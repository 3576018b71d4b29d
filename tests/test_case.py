import pytest

from minidrone.case import constant_case, get_type_name, split_words


@pytest.mark.parametrize(
    'text, expected',
    [
        ('italic', 'ITALIC'),
        ('fooBar', 'FOO_BAR'),
        ('FooBar', 'FOO_BAR'),
        ('HTTPServer', 'HTTP_SERVER'),
        ('foo-bar baz', 'FOO_BAR_BAZ'),
        ('  leading and trailing  ', 'LEADING_AND_TRAILING'),
        ('already_CONSTANT', 'ALREADY_CONSTANT'),
        ('take off!', 'TAKE_OFF'),
    ],
)
def test_constant_case(text, expected):
    assert constant_case(text) == expected


def test_constant_case_of_symbols_only_is_empty():
    assert constant_case('--- ') == ''


def test_split_words():
    assert split_words('flatTrim now') == ['flat', 'Trim', 'now']


def test_get_type_name():
    assert get_type_name({}) == 'dict'
    assert get_type_name(None) == 'NoneType'
