"""Singly and doubly linked lists with the classic pointer manipulations."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: object
    next: "Node | None" = field(default=None, repr=False)


def _split(head):
    """Cut a list in two; the front half gets the extra node of an odd list."""
    slow, fast = head, head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    back = slow.next
    slow.next = None
    return head, back


def _merge(first, second):
    """Merge two sorted node chains, taking from the first on ties."""
    anchor = Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _merge_sort(head):
    if head is None or head.next is None:
        return head
    front, back = _split(head)
    return _merge(_merge_sort(front), _merge_sort(back))


class SinglyLinkedList:
    """A singly linked list reachable from ``head``.

    Iteration and ``len`` walk the nodes, so they never finish while the
    list holds a loop; use ``find_loop_start`` or ``remove_loop`` first.
    """

    def __init__(self, values=()):
        self.head = None
        tail = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def push(self, value):
        """Insert value at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def append(self, value):
        """Insert value at the end and return its node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def _nodes(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __repr__(self):
        return f"SinglyLinkedList({list(self)!r})"

    def node_at(self, index):
        """The node at a zero-based position; IndexError when out of range."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"no node at index {index}")

    def reverse(self):
        """Reverse the list in place."""
        previous, current = None, self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_in_groups(self, k):
        """Reverse every run of k nodes in place; a shorter last run too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        new_head = None
        previous_tail = None
        current = self.head
        while current is not None:
            group_head = current
            previous = None
            count = 0
            while current is not None and count < k:
                current.next, previous, current = previous, current, current.next
                count += 1
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head

    def reverse_first(self, k):
        """Reverse the first k nodes in place, leaving the rest as they are."""
        if k < 1:
            raise ValueError("k must be at least 1")
        if k > len(self):
            raise ValueError(f"list has fewer than {k} nodes")
        old_head = self.head
        previous, current = None, self.head
        for _ in range(k):
            current.next, previous, current = previous, current, current.next
        old_head.next = current
        self.head = previous

    def middle(self):
        """The middle value (the second of two for an even length), or None."""
        if self.head is None:
            return None
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.value

    def sort(self):
        """Stable merge sort that relinks nodes instead of moving values."""
        self.head = _merge_sort(self.head)

    def find_loop_start(self):
        """The node where a loop begins, or None when the list ends."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                slow = self.head
                while slow is not fast:
                    slow = slow.next
                    fast = fast.next
                return slow
        return None

    def remove_loop(self):
        """Cut a loop so the list ends; return whether there was one."""
        start = self.find_loop_start()
        if start is None:
            return False
        last = start
        while last.next is not start:
            last = last.next
        last.next = None
        return True


def add_numbers(first, second):
    """Add two numbers given as digit sequences, least significant first.

    Both arguments may be SinglyLinkedList objects or plain iterables of
    digits; the sum comes back as a SinglyLinkedList in the same order.
    """
    result = SinglyLinkedList()
    tail = None
    carry = 0
    first_iter, second_iter = iter(first), iter(second)
    while True:
        a = next(first_iter, None)
        b = next(second_iter, None)
        if a is None and b is None:
            break
        total = carry + (a or 0) + (b or 0)
        carry, digit = divmod(total, 10)
        node = Node(digit)
        if tail is None:
            result.head = node
        else:
            tail.next = node
        tail = node
    if carry:
        node = Node(carry)
        if tail is None:
            result.head = node
        else:
            tail.next = node
    return result


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    value: object
    prev: "DoublyNode | None" = field(default=None, repr=False)
    next: "DoublyNode | None" = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        for value in values:
            self.append(value)

    def push(self, value):
        """Insert value at the front and return its node."""
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        return node

    def append(self, value):
        """Insert value at the end and return its node."""
        node = DoublyNode(value, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def insert_after(self, node, value):
        """Insert value right after node and return the new node."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        new_node = DoublyNode(value, node, node.next)
        if node.next is None:
            self.tail = new_node
        else:
            node.next.prev = new_node
        node.next = new_node
        return new_node

    def node_at(self, index):
        """The node at a zero-based position; IndexError when out of range."""
        if index >= 0:
            node = self.head
            for _ in range(index):
                if node is None:
                    break
                node = node.next
            if node is not None:
                return node
        raise IndexError(f"no node at index {index}")

    def reverse(self):
        """Reverse the list in place by swapping each node's links."""
        current = self.head
        while current is not None:
            current.prev, current.next = current.next, current.prev
            current = current.prev
        self.head, self.tail = self.tail, self.head

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self):
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return sum(1 for _ in self)

    def __repr__(self):
        return f"DoublyLinkedList({list(self)!r})"