import pytest

from advent.y2024d09 import compact_blocks_checksum, compact_files_checksum, parse_disk_map

EXAMPLE = "2333133121414131402\n"


def test_example_blocks():
    assert compact_blocks_checksum(EXAMPLE) == 1928


def test_example_files():
    assert compact_files_checksum(EXAMPLE) == 2858


def test_parse_disk_map():
    assert parse_disk_map("2333\n") == [2, 3, 3, 3]


def test_parse_error():
    with pytest.raises(ValueError):
        parse_disk_map("12a")


def test_gapless_disk_is_left_alone():
    disk = "1010101"
    assert compact_blocks_checksum(disk) == compact_files_checksum(disk)


def test_single_file_methods_agree():
    assert compact_blocks_checksum("5") == compact_files_checksum("5")


def test_trailing_newline_ignored():
    assert compact_files_checksum(EXAMPLE) == compact_files_checksum(EXAMPLE.strip())
    assert compact_blocks_checksum(EXAMPLE) == compact_blocks_checksum(EXAMPLE.strip())