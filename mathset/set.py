import mathset
import typing

_T = typing.TypeVar('_T')

class Set(typing.Generic[_T]):
    """A mutable, unordered collection of unique hashable elements.

    An element is a member of the Set at most once, no matter how many times
    it is added. Iteration order is unspecified and must not be relied upon.

    IMPORTANT: This class is NOT thread safe. Callers that share an instance
    between threads must provide their own locking around every call.
    """

    def __init__(
            self,
            *elements: _T,
            capacity: typing.Optional[int] = None
            ) -> None:
        # NOTE: A dict can't be pre-sized so the capacity hint is only
        # validated. It never limits how many elements can be added.
        mathset.validateCapacityHint(name='capacity', value=capacity)
        self._dict: typing.Dict[_T, None] = {}
        if elements:
            self.addAll(*elements)

    @classmethod
    def withCapacity(
            cls,
            capacity: int,
            *elements: _T
            ) -> 'Set[_T]':
        return cls(*elements, capacity=capacity)

    @classmethod
    def fromIterable(
            cls,
            iterable: typing.Iterable[_T],
            capacity: typing.Optional[int] = None
            ) -> 'Set[_T]':
        return cls(*iterable, capacity=capacity)

    def clone(
            self,
            capacity: typing.Optional[int] = None
            ) -> 'Set[_T]':
        """Return an independent shallow copy of this Set.

        Elements themselves are not copied, so a mutable object held by the
        source is the same object held by the clone.
        """
        mathset.validateCapacityHint(name='capacity', value=capacity)
        if capacity is None or capacity < len(self._dict):
            capacity = len(self._dict)
        clone = type(self)(capacity=capacity)
        clone._dict = dict(self._dict)
        return clone

    def size(self) -> int:
        return len(self._dict)

    def isEmpty(self) -> bool:
        return not self._dict

    # Order is not guaranteed
    def getAll(self) -> typing.List[_T]:
        return list(self._dict)

    def add(self, element: _T) -> bool:
        if element in self._dict:
            return False
        self._dict[element] = None
        return True

    def addAll(self, *elements: _T) -> int:
        added = 0
        for element in elements:
            if self.add(element):
                added += 1
        return added

    def contains(self, element: _T) -> bool:
        return element in self._dict

    def containsAll(self, *elements: _T) -> bool:
        for element in elements:
            if element not in self._dict:
                return False
        return True

    def containsAny(self, *elements: _T) -> bool:
        for element in elements:
            if element in self._dict:
                return True
        return False

    def clear(self) -> None:
        self._dict.clear()

    def remove(self, element: _T) -> bool:
        if element not in self._dict:
            return False
        del self._dict[element]
        return True

    def removeAll(self, *elements: _T) -> int:
        removed = 0
        for element in elements:
            if self.remove(element):
                removed += 1
        return removed

    def retainAll(self, *elements: _T) -> typing.Tuple[int, int]:
        """Keep only the members that are also in elements.

        Returns a (removedCount, retainedCount) tuple. Both counts are over the
        members this Set held before the call, so they always add up to the
        previous size.
        """
        keep = Set(*elements)
        removed = retained = 0
        for element in self.getAll():
            if keep.contains(element):
                retained += 1
            else:
                del self._dict[element]
                removed += 1
        return (removed, retained)

    def equals(self, other: 'Set[_T]') -> bool:
        if not isinstance(other, Set):
            return False
        if other is self:
            return True
        if len(self._dict) != len(other._dict):
            return False
        for element in self._dict:
            if element not in other._dict:
                return False
        return True

    def subtract(self, other: 'Set[_T]') -> None:
        mathset.validateMandatorySet(name='other', value=other)
        # Snapshot the members first, subtracting a Set from itself must
        # leave it empty
        self.removeAll(*other.getAll())

    def union(self, other: 'Set[_T]') -> None:
        mathset.validateMandatorySet(name='other', value=other)
        if other is self:
            return
        self.addAll(*other.getAll())

    def intersect(self, other: 'Set[_T]') -> None:
        mathset.validateMandatorySet(name='other', value=other)
        if other is self:
            return
        self.retainAll(*other.getAll())

    def issubset(self, other: 'Set[_T]') -> bool:
        mathset.validateMandatorySet(name='other', value=other)
        if len(self._dict) > len(other._dict):
            return False
        return other.containsAll(*self._dict)

    def issuperset(self, other: 'Set[_T]') -> bool:
        mathset.validateMandatorySet(name='other', value=other)
        return other.issubset(self)

    def isdisjoint(self, other: 'Set[_T]') -> bool:
        mathset.validateMandatorySet(name='other', value=other)
        smaller, larger = (self, other) if len(self) <= len(other) else (other, self)
        return not larger.containsAny(*smaller._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __bool__(self) -> bool:
        return bool(self._dict)

    def __contains__(self, element: object) -> bool:
        return element in self._dict

    def __iter__(self) -> typing.Iterator[_T]:
        # Iterate a snapshot so callers can mutate the Set while looping
        return iter(self.getAll())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self.equals(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Set):
            return not self.equals(other)
        return NotImplemented

    # Mutable so must not be hashable
    __hash__ = None

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) < len(other) and self.issubset(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) > len(other) and self.issuperset(other)

    def __or__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        result = self.clone(capacity=len(self) + len(other))
        result.union(other)
        return result

    def __and__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        result = self.clone()
        result.intersect(other)
        return result

    def __sub__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        result = self.clone()
        result.subtract(other)
        return result

    def __ior__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        self.union(other)
        return self

    def __iand__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        self.intersect(other)
        return self

    def __isub__(self, other: object) -> 'Set[_T]':
        if not isinstance(other, Set):
            return NotImplemented
        self.subtract(other)
        return self

    def __copy__(self) -> 'Set[_T]':
        return self.clone()

    def __str__(self) -> str:
        return '{{{contents}}}'.format(contents=', '.join(map(str, self._dict)))

    def __repr__(self) -> str:
        if not self._dict:
            return 'Set()'
        return 'Set({{{contents}}})'.format(contents=', '.join(map(repr, self._dict)))
