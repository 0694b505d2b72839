"""
有序双向链表集合

元素按 key 从小到大排列，key 相同的元素视为重复，不会被插入。
分词场景下新元素绝大多数追加在尾部，所以插入时从尾部向前查找插入点。
非线程安全。
"""
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

V = TypeVar("V")


class Cell(Generic[V]):
    """链表节点"""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: V):
        if value is None:
            raise ValueError("cell value can not be None")
        self.value = value
        self.prev: Optional["Cell[V]"] = None
        self.next: Optional["Cell[V]"] = None


class SortedLinkedSet(Generic[V]):
    """按 key 排序、去重的双向链表"""

    def __init__(self, key: Callable[[V], Any]):
        self._key = key
        self.head: Optional[Cell[V]] = None
        self.tail: Optional[Cell[V]] = None
        self._size = 0

    def insert(self, value: V) -> bool:
        """插入新元素，保持有序；已存在相同 key 的元素时返回 False"""
        new_cell = Cell(value)
        if self._size == 0:
            self.head = self.tail = new_cell
            self._size += 1
            return True

        new_key = self._key(value)
        cur = self.tail
        while cur is not None:
            cur_key = self._key(cur.value)
            if cur_key > new_key:
                cur = cur.prev
            elif cur_key == new_key:
                return False
            else:
                break

        if cur is not None:
            # 插在 cur 之后
            new_cell.prev = cur
            new_cell.next = cur.next
            if cur.next is not None:
                cur.next.prev = new_cell
            else:
                self.tail = new_cell
            cur.next = new_cell
        else:
            # 插在头部之前
            new_cell.next = self.head
            self.head.prev = new_cell
            self.head = new_cell
        self._size += 1
        return True

    def peek_first(self) -> Optional[V]:
        return self.head.value if self.head is not None else None

    def poll_first(self) -> Optional[V]:
        """移除并返回首个元素"""
        if self._size == 0:
            return None
        value = self.head.value
        self._size -= 1
        if self._size == 0:
            self.head = self.tail = None
        else:
            self.head = self.head.next
            self.head.prev = None
        return value

    def peek_last(self) -> Optional[V]:
        return self.tail.value if self.tail is not None else None

    def poll_last(self) -> Optional[V]:
        """移除并返回末尾元素"""
        if self._size == 0:
            return None
        value = self.tail.value
        self._size -= 1
        if self._size == 0:
            self.head = self.tail = None
        else:
            self.tail = self.tail.prev
            self.tail.next = None
        return value

    def cells(self, start: Optional[Cell[V]] = None) -> Iterator[Cell[V]]:
        """从 start（默认头部）开始依次遍历节点"""
        cur = start if start is not None else self.head
        while cur is not None:
            yield cur
            cur = cur.next

    def clear(self):
        self.head = self.tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[V]:
        for cell in self.cells():
            yield cell.value
