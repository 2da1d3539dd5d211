import pytest

from apekit.allocator import END_MARKER, Allocator, Block, DoubleFreeError


def test_alloc_is_zeroed_and_labelled():
    allocator = Allocator(4)
    block = allocator.alloc("tiny", 8)
    assert block.label == "tiny"
    assert len(block.data) >= 8
    assert all(byte == 0 for byte in block.data)
    assert block.marker == END_MARKER


def test_aligned_request_keeps_size():
    allocator = Allocator(4)
    block = allocator.alloc("x", 8)
    assert len(block) == 8
    assert block.total_size == 44


def test_unaligned_request_grows():
    allocator = Allocator(16)
    block = allocator.alloc("x", 8)
    assert len(block) > 8
    assert block.total_size == 32 + len(block) + 4


def test_len_tracks_live_blocks():
    allocator = Allocator(8)
    first = allocator.alloc("a", 10)
    allocator.alloc("b", 20)
    assert len(allocator) == 2
    allocator.free(first)
    assert len(allocator) == 1


def test_double_free_raises():
    allocator = Allocator(8)
    block = allocator.alloc("a", 4)
    allocator.free(block)
    with pytest.raises(DoubleFreeError):
        allocator.free(block)


def test_free_foreign_block_raises():
    allocator = Allocator(8)
    other = Allocator(8).alloc("a", 4)
    with pytest.raises(DoubleFreeError):
        allocator.free(other)


def test_free_none_is_ignored():
    allocator = Allocator(8)
    allocator.alloc("a", 4)
    allocator.free(None)
    assert len(allocator) == 1


def test_corrupted_block_raises():
    allocator = Allocator(8)
    block = allocator.alloc("a", 4)
    block.marker = 1
    with pytest.raises(DoubleFreeError):
        allocator.free(block)


def test_clear_releases_everything():
    allocator = Allocator(8)
    block = allocator.alloc("a", 4)
    allocator.alloc("b", 4)
    allocator.clear()
    assert len(allocator) == 0
    with pytest.raises(DoubleFreeError):
        allocator.free(block)


def test_context_manager_clears():
    with Allocator(8) as allocator:
        allocator.alloc("a", 4)
        assert len(allocator) == 1
    assert len(allocator) == 0


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Allocator(0)
    with pytest.raises(ValueError):
        Allocator(8).alloc("a", -1)


def test_block_identity_not_equality():
    allocator = Allocator(4)
    a = allocator.alloc("same", 4)
    b = allocator.alloc("same", 4)
    allocator.free(a)
    assert len(allocator) == 1
    allocator.free(b)
    assert len(allocator) == 0
    assert isinstance(a, Block) and a is not b