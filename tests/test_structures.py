import pytest

from algobook.structures import (
    ArrayQueue,
    BinaryTree,
    LinkedStack,
    Node,
    PriorityQueue,
    Queue,
    Stack,
    count,
    height,
    level_order,
    preorder,
    preorder_stack,
    reverse_cycle,
)


def _ring(values):
    head = Node(values[0])
    head.next = head
    last = head
    for value in values[1:]:
        node = Node(value)
        last.insert_after(node)
        last = node
    return head


def _example_tree():
    return BinaryTree(
        0,
        BinaryTree(1, BinaryTree(3), BinaryTree(4)),
        BinaryTree(2, BinaryTree(5), BinaryTree(6)),
    )


def test_ring_insert_and_cycle():
    head = _ring([1, 2, 3, 4, 5])
    assert list(head.cycle()) == [1, 2, 3, 4, 5]
    assert list(head.next.cycle()) == [2, 3, 4, 5, 1]


def test_delete_after():
    head = _ring([1, 2, 3])
    removed = head.delete_after()
    assert removed.item == 2
    assert list(head.cycle()) == [1, 3]


def test_delete_after_end_of_list():
    with pytest.raises(ValueError):
        Node(1).delete_after()


def test_reverse_cycle():
    head = _ring([1, 2, 3, 4, 5])
    first = reverse_cycle(head)
    assert list(first.cycle()) == [5, 4, 3, 2, 1]
    assert head.next is None


def test_reverse_linear_list():
    head = Node(1, Node(2, Node(3)))
    assert list(reverse_cycle(head).cycle()) == [3, 2, 1]


def test_stack_lifo():
    stack = Stack(7)
    for i in range(5):
        stack.push(i)
    assert [stack.pop(), stack.pop()] == [4, 3]
    assert len(stack) == 3


def test_stack_limits():
    stack = Stack(1)
    stack.push("a")
    with pytest.raises(OverflowError):
        stack.push("b")
    assert stack.pop() == "a"
    with pytest.raises(IndexError):
        stack.pop()


def test_linked_stack():
    stack = LinkedStack()
    for i in range(5):
        stack.push(i)
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    with pytest.raises(IndexError):
        stack.pop()


def test_queue_fifo():
    queue = Queue()
    for i in range(5):
        queue.put(i)
    assert [queue.get(), queue.get()] == [0, 1]
    queue.put(9)
    assert [queue.get() for _ in range(len(queue))] == [2, 3, 4, 9]
    with pytest.raises(IndexError):
        queue.get()


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    for i in range(3):
        queue.put(i)
    with pytest.raises(OverflowError):
        queue.put(99)
    assert [queue.get(), queue.get()] == [0, 1]
    queue.put(3)
    queue.put(4)
    assert [queue.get() for _ in range(len(queue))] == [2, 3, 4]
    with pytest.raises(IndexError):
        queue.get()


def test_priority_queue():
    pq = PriorityQueue(10)
    for value in (12, 2, 15, 8):
        pq.insert(value)
    assert pq.pop_max() == 15
    assert pq.pop_max() == 12
    pq.insert(3)
    assert [pq.pop_max() for _ in range(len(pq))] == [8, 3, 2]
    with pytest.raises(IndexError):
        pq.pop_max()


def test_priority_queue_full():
    pq = PriorityQueue(1)
    pq.insert(1)
    with pytest.raises(OverflowError):
        pq.insert(2)


def test_tree_count_and_height():
    tree = _example_tree()
    assert count(tree) == 7
    assert height(tree) == 2
    assert count(None) == 0
    assert height(None) == -1


def test_preorder():
    tree = _example_tree()
    assert list(preorder(tree)) == [0, 1, 3, 4, 2, 5, 6]
    assert list(preorder_stack(tree)) == list(preorder(tree))


def test_level_order_right_to_left():
    assert list(level_order(_example_tree())) == [0, 2, 1, 6, 5, 4, 3]


def test_traversals_of_empty_tree():
    assert list(preorder(None)) == []
    assert list(preorder_stack(None)) == []
    assert list(level_order(None)) == []