from __future__ import annotations
from typing import Iterator, List

from .constants import NIL
from .dcel import Vertex


class VertexList:
    """
    Двозв'язний список вершин поверх арени (nodes = Mesh.vertices).
    Зв'язки prev/next зберігаються в самих Vertex, тому вершина може
    одночасно бути лише в одному списку. Усі операції - O(1), крім
    append_chain (йде до кінця ланцюжка).
    """

    def __init__(self, nodes: List[Vertex]):
        self.nodes = nodes
        self.head = NIL
        self.tail = NIL

    def first(self) -> int:
        return self.head

    def last(self) -> int:
        return self.tail

    def is_empty(self) -> bool:
        return self.head == NIL

    def clear(self) -> None:
        self.head = self.tail = NIL

    def insert_before(self, target: int, v: int) -> None:
        N = self.nodes
        N[v].prev = N[target].prev
        N[v].next = target
        if N[v].prev == NIL:
            self.head = v
        else:
            N[N[v].prev].next = v
        N[target].prev = v

    def insert_after(self, target: int, v: int) -> None:
        N = self.nodes
        N[v].prev = target
        N[v].next = N[target].next
        if N[v].next == NIL:
            self.tail = v
        else:
            N[N[v].next].prev = v
        N[target].next = v

    def append(self, v: int) -> None:
        N = self.nodes
        if self.head == NIL:
            self.head = v
        else:
            N[self.tail].next = v
        N[v].prev = self.tail
        N[v].next = NIL
        self.tail = v

    def append_chain(self, v: int) -> None:
        """Дописати ланцюжок, що починається з v (кінець - перший next == NIL)."""
        N = self.nodes
        if self.head == NIL:
            self.head = v
        else:
            N[self.tail].next = v
        N[v].prev = self.tail
        while N[v].next != NIL:
            v = N[v].next
        self.tail = v

    def remove(self, v: int) -> None:
        N = self.nodes
        prev, nxt = N[v].prev, N[v].next
        if prev == NIL:
            self.head = nxt
        else:
            N[prev].next = nxt
        if nxt == NIL:
            self.tail = prev
        else:
            N[nxt].prev = prev

    def remove_sublist(self, a: int, b: int) -> None:
        """Вирізати відрізок a..b (включно); зв'язки всередині відрізку не чіпаємо."""
        N = self.nodes
        prev, nxt = N[a].prev, N[b].next
        if prev == NIL:
            self.head = nxt
        else:
            N[prev].next = nxt
        if nxt == NIL:
            self.tail = prev
        else:
            N[nxt].prev = prev

    def __iter__(self) -> Iterator[int]:
        v = self.head
        while v != NIL:
            nxt = self.nodes[v].next
            yield v
            v = nxt

    def __len__(self) -> int:
        return sum(1 for _ in self)
