"""Disk fragmenter: compacting files on a disk and computing its checksum."""

DIGITS = "0123456789"


def parse_disk_map(text):
    """Read the dense disk map into a list of lengths."""
    text = text.strip()
    if any(c not in DIGITS for c in text):
        raise ValueError(f"bad disk map: {text!r}")
    return [int(c) for c in text]


def _checksum(blocks):
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def compact_blocks_checksum(text):
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = []
    for index, length in enumerate(parse_disk_map(text)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * length)
    left, right = 0, len(blocks) - 1
    while True:
        while left < right and blocks[left] is not None:
            left += 1
        while left < right and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
    return _checksum(blocks)


def compact_files_checksum(text):
    """Checksum after moving whole files, highest id first, into the leftmost gap that fits."""
    disk = parse_disk_map(text)
    file_lengths = disk[0::2]
    space_lengths = disk[1::2]
    file_offsets, space_offsets = [], []
    position = 0
    for index, length in enumerate(disk):
        (file_offsets if index % 2 == 0 else space_offsets).append(position)
        position += length

    for file_id in range(len(file_lengths) - 1, 0, -1):
        size = file_lengths[file_id]
        slot = next(
            (i for i in range(min(file_id, len(space_lengths))) if space_lengths[i] >= size),
            None,
        )
        if slot is None:
            continue
        file_offsets[file_id] = space_offsets[slot]
        space_offsets[slot] += size
        space_lengths[slot] -= size

    return sum(
        file_id * sum(range(offset, offset + size))
        for file_id, (offset, size) in enumerate(zip(file_offsets, file_lengths))
    )