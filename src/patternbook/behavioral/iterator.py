# src/patternbook/behavioral/iterator.py
"""
Iterator: traverse a container without knowing how it is built.

A contiguous array can be walked with an index, but a linked list cannot. An
iterator hides the traversal logic behind a small common interface, so the
list's internals can change without breaking its users. The second half shows
a generic external iterator (first / next / is_done / current) over any
aggregate, including one that keeps its items sorted.
"""

from typing import Any, Callable, Generic, Iterator as TypingIterator, List, Optional, TypeVar

from ..enums import PatternCategory
from ..registry import register_pattern


T = TypeVar("T")

ARRAY_LEN = 42


def fill_with_positions(length: int = ARRAY_LEN) -> List[int]:
    """Walk a contiguous array by index, setting each slot to its position."""
    array = [0] * length
    for i in range(length):
        array[i] = i
    return array


class _Node:

    __slots__ = ("next_node", "prev_node", "value")

    def __init__(self, prev_node: Optional["_Node"] = None,
                 next_node: Optional["_Node"] = None, value: int = 0):
        self.prev_node = prev_node
        self.next_node = next_node
        self.value = value


class ListIterator:
    """Position in an IntLinkedList. ``None`` stands for one past the end."""

    def __init__(self, position: Optional[_Node]):
        self._current = position

    def advance(self) -> "ListIterator":
        if self._current is None:
            raise RuntimeError("IteratorCannotMoveToNext")
        self._current = self._current.next_node
        return self

    @property
    def node(self) -> Optional[_Node]:
        return self._current

    @property
    def value(self) -> int:
        if self._current is None:
            raise RuntimeError("IteratorCannotDereferenceEnd")
        return self._current.value

    @value.setter
    def value(self, new_value: int):
        if self._current is None:
            raise RuntimeError("IteratorCannotDereferenceEnd")
        self._current.value = new_value

    def __eq__(self, other):
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._current is other._current

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None


class IntLinkedList:
    """Doubly linked list of ints."""

    def __init__(self):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def push_back(self, value: int):
        new_node = _Node(self._tail, None, value)
        if self._head is None:
            self._head = new_node
        else:
            self._tail.next_node = new_node
        self._tail = new_node
        self._size += 1

    def pop_front(self) -> Optional[int]:
        """Remove the first value and return it. Does nothing on an empty list."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next_node
        if self._head is None:
            self._tail = None
        else:
            self._head.prev_node = None
        self._size -= 1
        return node.value

    def begin(self) -> ListIterator:
        return ListIterator(self._head)

    def end(self) -> ListIterator:
        return ListIterator(None)

    def __iter__(self) -> TypingIterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next_node


class AggregateIterator(Generic[T]):
    """External iterator over the items of an aggregate."""

    def __init__(self, aggregate: "Aggregate[T]"):
        self._aggregate = aggregate
        self._index = 0

    def first(self):
        self._index = 0

    def next(self):
        self._index += 1

    def is_done(self) -> bool:
        return self._index >= len(self._aggregate._data)

    def current(self) -> T:
        if self.is_done():
            raise IndexError("iterator is past the last item")
        return self._aggregate._data[self._index]


class Aggregate(Generic[T]):
    """Keeps items in insertion order."""

    def __init__(self):
        self._data: List[T] = []

    def add(self, item: T):
        self._data.append(item)

    def create_iterator(self) -> AggregateIterator[T]:
        return AggregateIterator(self)


class AggregateSet(Aggregate[T]):
    """Keeps unique items sorted, by ``key`` when given."""

    def __init__(self, key: Optional[Callable[[T], Any]] = None):
        super().__init__()
        self._key = key if key is not None else (lambda item: item)

    def add(self, item: T):
        item_key = self._key(item)
        if any(self._key(existing) == item_key for existing in self._data):
            return
        self._data.append(item)
        self._data.sort(key=self._key)


class Money:

    def __init__(self, amount: int = 0):
        self._amount = amount

    def set_money(self, amount: int):
        self._amount = amount

    def get_money(self) -> int:
        return self._amount


class Name:

    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name

    def __str__(self):
        return self._name


@register_pattern(
    "linked_list_iterator", "Iterator (linked list)", PatternCategory.BEHAVIORAL,
    summary="Walk a linked list through begin/end iterators.",
    reference_url="https://en.wikipedia.org/wiki/Iterator_pattern",
)
def linked_list_iterator_demo():
    array = fill_with_positions()
    print(f"Array filled by position: {array[0]}..{array[-1]}")

    my_list = IntLinkedList()
    for i in range(10):
        my_list.push_back(i)

    # add 42 to each item, moving with the iterator only
    it = my_list.begin()
    while it != my_list.end():
        it.value += 42
        it.advance()
    print("List after adding 42: " + " ".join(str(value) for value in my_list))


@register_pattern(
    "iterator", "Iterator", PatternCategory.BEHAVIORAL,
    summary="One external iterator interface over plain and sorted aggregates.",
    reference_url="https://en.wikipedia.org/wiki/Iterator_pattern",
)
def iterator_demo():
    print("________________Iterator with int______________________________________")
    agg: Aggregate[int] = Aggregate()
    for i in range(10):
        agg.add(i)
    it = agg.create_iterator()
    it.first()
    while not it.is_done():
        print(it.current())
        it.next()

    print("________________Iterator with Class Money______________________________")
    agg2: Aggregate[Money] = Aggregate()
    agg2.add(Money(100))
    agg2.add(Money(100))
    agg2.add(Money(10000))
    it2 = agg2.create_iterator()
    it2.first()
    while not it2.is_done():
        print(it2.current().get_money())
        it2.next()

    print("________________Set Iterator with Class Name______________________________")
    aset: AggregateSet[Name] = AggregateSet(key=Name.get_name)
    for name in ("Qmt", "Bmt", "Cmt", "Amt"):
        aset.add(Name(name))
    it3 = aset.create_iterator()
    it3.first()
    while not it3.is_done():
        print(it3.current())
        it3.next()
