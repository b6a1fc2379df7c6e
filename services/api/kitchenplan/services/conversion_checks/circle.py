from typing import Callable, Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S")


class Circle(Generic[T]):
    """
    A circular dependency between items, e.g. kg -> g -> Pck -> kg.

    Equality ignores the starting point: Circle([1, 2, 3]) == Circle([2, 3, 1]).
    Direction matters: Circle([1, 2, 3]) != Circle([1, 3, 2]).
    """

    def __init__(self, vertices: Sequence[T]):
        self.vertices = tuple(vertices)

    @property
    def length(self) -> int:
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[T]:
        return iter(self.vertices)

    def map(self, transform: Callable[[T], S]) -> "Circle[S]":
        return Circle([transform(v) for v in self.vertices])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        if len(self.vertices) != len(other.vertices):
            return False
        if not self.vertices:
            return True

        size = len(self.vertices)
        # Items may repeat (equal conversions), so try every alignment
        for start, item in enumerate(self.vertices):
            if item != other.vertices[0]:
                continue
            if all(self.vertices[(start + i) % size] == other.vertices[i] for i in range(size)):
                return True
        return False

    def __hash__(self) -> int:
        # Order independent so rotations hash alike
        return sum(hash(v) for v in self.vertices)

    def __repr__(self) -> str:
        return f"Circle({list(self.vertices)})"
