import json

import pytest

from advent.y2022d13 import compare, decoder_key, parse_packet, right_order_sum

PAIRS = [
    ("[1,1,3,1,1]", "[1,1,5,1,1]", True),
    ("[[1],[2,3,4]]", "[[1],4]", True),
    ("[9]", "[[8,7,6]]", False),
    ("[[4,4],4,4]", "[[4,4],4,4,4]", True),
    ("[7,7,7,7]", "[7,7,7]", False),
    ("[]", "[3]", True),
    ("[[[]]]", "[[]]", False),
    ("[1,[2,[3,[4,[5,6,7]]]],8,9]", "[1,[2,[3,[4,[5,6,0]]]],8,9]", False),
]

EXAMPLE = "\n\n".join(f"{left}\n{right}" for left, right, _ in PAIRS) + "\n"


@pytest.mark.parametrize("text", [p for left, right, _ in PAIRS for p in (left, right)])
def test_parse_matches_json(text):
    assert parse_packet(text) == json.loads(text)


def test_parse_ignores_spaces():
    assert parse_packet("[10, [ ], [2, 3]]") == [10, [], [2, 3]]


@pytest.mark.parametrize("left,right,in_order", PAIRS)
def test_compare_example_pairs(left, right, in_order):
    assert (compare(parse_packet(left), parse_packet(right)) < 0) == in_order


@pytest.mark.parametrize("left,right,_", PAIRS)
def test_compare_is_antisymmetric(left, right, _):
    a, b = parse_packet(left), parse_packet(right)
    assert compare(a, b) == -compare(b, a)
    assert compare(a, a) == 0


def test_number_equals_singleton_list():
    assert compare(5, [5]) == 0
    assert compare([[5]], 5) == 0


def test_right_order_sum():
    assert right_order_sum(EXAMPLE) == 13


def test_decoder_key():
    assert decoder_key(EXAMPLE) == 140


def test_decoder_key_without_packets():
    assert decoder_key("") == 2


@pytest.mark.parametrize("text", ["[1,a]", "", "[1", "1]"])
def test_malformed_packet_raises(text):
    with pytest.raises(ValueError):
        parse_packet(text)