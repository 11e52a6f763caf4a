from array_ import Array, DEFAULT_DTYPE
from logger import print_
from utils import parent, left_child, right_child

DEFAULT_INITIAL_CAPACITY = 10


class EmptyHeapError(IndexError):
    """Raised when the minimum is requested from a heap with no elements."""


class Heap:
    """
    Priority queue of integers where the lowest value has the highest priority.

    Insert and extract_min are O(log n). The backing buffer starts at
    `initial_capacity` slots, doubles whenever it is full and never shrinks.

    Not synchronized: an instance must not be modified by several threads
    at once.
    """

    def __init__(self, initial_capacity=DEFAULT_INITIAL_CAPACITY, dtype=DEFAULT_DTYPE):
        self.data = Array(initial_capacity, dtype)

    def __len__(self):
        return self.data.length()

    def __repr__(self):
        return f"{type(self).__name__}(count={self.count()}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return self.data.size

    def insert(self, value) -> None:
        self.data.insert(value)
        self._sift_up(self.data.index - 1)

    def extract_min(self) -> int:
        if self.data.index == 0:
            print_("heap_.py: extract_min called on an empty heap")
            raise EmptyHeapError("extract_min from an empty heap")

        elements = self.data.elements
        min_element = int(elements[0])

        # The last slot stays counted until the walk is over
        elements[0] = elements[self.data.index - 1]
        self._sift_down(0, self.data.index)
        self.data.remove_last()

        return min_element

    def peek(self) -> int:
        if self.data.index == 0:
            raise EmptyHeapError("peek into an empty heap")
        return int(self.data.elements[0])

    def count(self) -> int:
        return self.data.length()

    def is_empty(self) -> bool:
        return self.data.length() == 0

    def snapshot(self, active_only=False):
        """
        Returns a copy of the backing buffer.

        By default the whole allocated capacity is copied, including slots
        past count() that hold stale values. Pass `active_only=True` to get
        only the elements currently in the heap, in heap order.
        """
        return self.data.copy(active_only)

    def free(self):
        self.data.delete_all()

    # Helper function to maintain heap property from child to parent
    def _sift_up(self, i):
        elements = self.data.elements
        parent_index = parent(i)
        while parent_index >= 0 and elements[i] < elements[parent_index]:
            self.data.swap(i, parent_index)
            i = parent_index
            parent_index = parent(i)

    # Helper function to maintain heap property from parent to child
    def _sift_down(self, i, n):
        elements = self.data.elements
        while True:
            left = left_child(i)
            right = right_child(i)

            if left >= n:
                break

            smallest = left
            if right < n and elements[right] <= elements[left]:
                smallest = right

            if elements[i] <= elements[smallest]:
                break

            self.data.swap(i, smallest)
            i = smallest
