from pestkit.stack import Stack


def test_snapshot_with_empty():
    stack = Stack()
    stack.snapshot()
    assert stack.is_empty()
    stack.push(0)
    stack.restore()
    assert stack.is_empty()


def test_snapshot_twice():
    stack = Stack()
    stack.push(0)
    stack.snapshot()
    stack.snapshot()
    stack.restore()
    stack.restore()
    assert stack[0 : len(stack)] == [0]


def test_stack_ops():
    stack = Stack()

    assert stack.is_empty()
    assert stack.peek() is None
    assert stack.pop() is None

    stack.push(0)
    assert not stack.is_empty()
    assert stack.peek() == 0

    stack.push(1)
    assert not stack.is_empty()
    assert stack.peek() == 1

    assert stack.pop() == 1
    assert not stack.is_empty()
    assert stack.peek() == 0

    stack.push(2)
    assert stack.peek() == 2

    stack.push(3)
    assert stack.peek() == 3

    stack.snapshot()

    assert stack.pop() == 3
    assert stack.peek() == 2

    stack.snapshot()

    assert stack.pop() == 2
    assert stack.peek() == 0

    assert stack.pop() == 0
    assert stack.is_empty()

    stack.restore()
    assert stack.pop() == 2
    assert stack.pop() == 0
    assert stack.pop() is None

    stack.restore()
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.pop() == 0
    assert stack.pop() is None


def test_restore_without_snapshot_empties():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    stack.restore()
    assert stack.is_empty()
    assert len(stack) == 0


def test_clear_snapshot_keeps_changes():
    stack = Stack()
    stack.push("a")
    stack.snapshot()
    stack.push("b")
    stack.clear_snapshot()
    assert stack[:] == ["a", "b"]


def test_clear_snapshot_falls_back_to_outer():
    stack = Stack()
    stack.push("a")
    stack.snapshot()
    stack.push("b")
    stack.snapshot()
    stack.push("c")
    stack.clear_snapshot()
    stack.restore()
    assert stack[:] == ["a"]


def test_len_and_index():
    stack = Stack()
    for item in ("x", "y", "z"):
        stack.push(item)
    assert len(stack) == 3
    assert stack[0] == "x"
    assert stack[1:3] == ["y", "z"]