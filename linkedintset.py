import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

logger = logging.getLogger(__name__)

SET1_VALUES = (10, 20, 30, 40)
SET2_VALUES = (10, 30, 50, 70)


class ReleasedSetError(RuntimeError):
    pass


class LinkedNode:
    def __init__(self, val: int) -> None:
        self.val = val
        self.next: Optional["LinkedNode"] = None


class LinkedList:
    def __init__(self) -> None:
        self.head: Optional[LinkedNode] = None
        self.tail: Optional[LinkedNode] = None

    def new_last(self, val: int) -> LinkedNode:
        n = LinkedNode(val)

        if self.head is None:
            self.head = n
            self.tail = n
        else:
            self.tail.next = n
            self.tail = n

        return n

    def clear(self) -> None:
        # unlink so the nodes don't keep each other alive
        h = self.head
        while h is not None:
            nxt = h.next
            h.next = None
            h = nxt
        self.head = None
        self.tail = None


class LinkedIntSet:
    """Insertion-ordered collection of ints backed by a singly linked list.

    Duplicates are kept: adding a value twice stores it twice and counts it
    twice.
    """

    def __init__(self) -> None:
        self.ll = LinkedList()
        self.count = 0
        self.released = False

    @staticmethod
    def new(initial: Optional[int] = None) -> "LinkedIntSet":
        s = LinkedIntSet()
        if initial is not None:
            s.add(initial)
        return s

    def add(self, val: int) -> "LinkedIntSet":
        if self.released:
            raise ReleasedSetError("add() on a released set")
        if not isinstance(val, int) or isinstance(val, bool):
            raise TypeError(f"expected int, got {type(val).__name__}")

        self.ll.new_last(val)
        self.count += 1
        return self

    def contains(self, val: int) -> bool:
        h = self.ll.head
        while h is not None:
            if h.val == val:
                return True
            else:
                h = h.next
        return False

    def copy(self) -> "LinkedIntSet":
        out = LinkedIntSet()
        for v in self:
            out.add(v)
        return out

    def intersection(self, other: "LinkedIntSet") -> "LinkedIntSet":
        out = LinkedIntSet()
        for v in self:
            if other.contains(v):
                out.add(v)
        return out

    def difference(self, other: "LinkedIntSet") -> "LinkedIntSet":
        out = LinkedIntSet()
        for v in self:
            if not other.contains(v):
                out.add(v)
        return out

    def release(self) -> None:
        if self.released:
            return
        logger.debug("releasing set of %d elems", self.count)
        self.ll.clear()
        self.count = 0
        self.released = True

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[int]:
        h = self.ll.head
        while h is not None:
            yield h.val
            h = h.next

    def __contains__(self, val: object) -> bool:
        return self.contains(val)

    def __repr__(self) -> str:
        elems = ", ".join(str(v) for v in self)
        return f"LinkedIntSet([{elems}])"


# C-style helpers where a missing set is spelled None. Empty results of
# intersection() and difference() come back as None, not as an empty set.

def create(initial: Optional[int] = None) -> LinkedIntSet:
    return LinkedIntSet.new(initial)


def add(s: Optional[LinkedIntSet], val: int) -> LinkedIntSet:
    if s is None:
        return LinkedIntSet().add(val)
    return s.add(val)


def contains(s: Optional[LinkedIntSet], val: int) -> bool:
    if s is None:
        return False
    return s.contains(val)


def _or_none(s: LinkedIntSet) -> Optional[LinkedIntSet]:
    if s.count == 0:
        return None
    return s


def intersection(a: Optional[LinkedIntSet], b: Optional[LinkedIntSet]) -> Optional[LinkedIntSet]:
    if a is None or b is None:
        return None
    res = _or_none(a.intersection(b))
    logger.debug("intersection: %d x %d -> %d", a.count, b.count, size(res))
    return res


def difference(a: Optional[LinkedIntSet], b: Optional[LinkedIntSet]) -> Optional[LinkedIntSet]:
    if a is None:
        return None
    if b is None:
        res = _or_none(a.copy())
    else:
        res = _or_none(a.difference(b))
    logger.debug("difference: %d - %d -> %d", a.count, size(b), size(res))
    return res


def size(s: Optional[LinkedIntSet]) -> int:
    if s is None:
        return 0
    return s.count


def format_set(s: Optional[LinkedIntSet]) -> str:
    if s is None or s.ll.head is None:
        return "{}"
    return "".join(f"{v} " for v in s)


def print_set(s: Optional[LinkedIntSet], file: Optional[TextIO] = None) -> None:
    print(format_set(s), file=file)


def release(s: Optional[LinkedIntSet]) -> None:
    if s is None:
        return
    s.release()


def build(values: Iterable[int]) -> Optional[LinkedIntSet]:
    s = None
    for v in values:
        s = add(s, v)
    return s


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Linked-list int set demo")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    s1 = build(SET1_VALUES)
    print_set(s1)

    s2 = build(SET2_VALUES)
    print_set(s2)

    print(f"total elems in set1: {size(s1)}")
    print(f"total elems in set2: {size(s2)}")

    s3 = intersection(s1, s2)
    print_set(s3)
    print(f"total elems in set3: {size(s3)}")

    s4 = difference(s1, s2)
    print(f"total elems in set4: {size(s4)}")
    print_set(s4)

    s5 = difference(s2, s1)
    print(f"total elems in set5: {size(s5)}")
    print_set(s5)

    for s in (s1, s2, s3, s4, s5):
        release(s)

    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
