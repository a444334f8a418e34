import pytest

from oikit.containers import Block, DynamicArray, LinkedStack


def test_stack_is_lifo():
    stack = LinkedStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert len(stack) == 0


def test_stack_top_and_len():
    stack = LinkedStack(["a", "b"])
    assert stack.top() == "b"
    assert len(stack) == 2


def test_stack_iterates_top_first():
    stack = LinkedStack([1, 2, 3])
    assert list(stack) == [3, 2, 1]


def test_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(IndexError, match="Stack is empty"):
        stack.pop()
    with pytest.raises(IndexError, match="Stack is empty"):
        stack.top()


def test_array_resize_and_assign():
    arr = DynamicArray()
    arr.resize(5)
    arr[1] = 0
    assert arr[1] == 0
    assert len(arr) == 5
    assert arr.capacity() == 10


def test_array_append_keeps_order_and_capacity():
    items = list(range(20))
    arr = DynamicArray(items)
    assert list(arr) == items
    assert arr.capacity() >= len(arr)


def test_array_capacity_doubles():
    arr = DynamicArray([1])
    before = arr.capacity()
    while len(arr) < before:
        arr.append(0)
    arr.append(0)
    assert arr.capacity() == 2 * before


def test_array_erase_shifts():
    arr = DynamicArray([10, 20, 30, 40])
    arr.erase(1)
    assert list(arr) == [10, 30, 40]


def test_array_out_of_range():
    arr = DynamicArray([1, 2])
    with pytest.raises(IndexError, match="Index out of range"):
        arr[2]
    with pytest.raises(IndexError):
        arr[-1] = 5
    with pytest.raises(IndexError):
        arr.erase(2)


def test_array_shrink_hides_elements():
    arr = DynamicArray([1, 2, 3])
    arr.resize(1)
    assert list(arr) == [1]
    with pytest.raises(IndexError):
        arr[1]


def test_block_resize_and_set():
    block = Block()
    block.resize(11)
    for i in range(1, 11):
        block[i] = i
    assert [block[i] for i in range(1, 11)] == list(range(1, 11))


def test_block_copy_grows_size():
    block = Block(2)
    block.copy([7, 8, 9])
    assert len(block) == 3
    assert list(block) == [7, 8, 9]


def test_block_copy_shorter_keeps_size():
    block = Block(4, default=0)
    block.copy([5, 6])
    assert list(block) == [5, 6, 0, 0]


def test_block_fill_and_multiply():
    block = Block(3)
    block.fill(1)
    assert list(block) == [1, 1, 1]
    block.multiply(2)
    assert len(block) == 6
    assert block.allocated >= 6


def test_block_extend_by_and_allocation_kept():
    block = Block(4)
    block.extend_by(2)
    assert len(block) == 6
    block.resize(1)
    assert block.allocated == 6
    assert len(block) == 1


def test_block_release_and_bounds():
    block = Block(3)
    block.release()
    assert len(block) == 0
    assert block.allocated == 0
    with pytest.raises(IndexError):
        block[0]