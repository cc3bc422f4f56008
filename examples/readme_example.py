"""Basic graphcopy usage example.

Demonstrates:
- Copying a record with a mutable list field
- Self-referencing and shared structures
- Inspecting per-copy statistics
"""

from dataclasses import dataclass, field

from graphcopy import CopySettings, GraphCopier, copy


@dataclass
class Person:
    name: str
    age: int
    favorite_books: list[str] = field(default_factory=list)


class Node:
    def __init__(self, label: str) -> None:
        self.label = label
        self.next: Node | None = None


def main() -> None:
    alice = Person("Alice", 30, ["Book1", "Book2"])
    clone = copy(alice)

    print(f"Different objects: {alice is not clone}")
    print(f"Same name: {alice.name == clone.name}")
    print(f"Different book lists: {alice.favorite_books is not clone.favorite_books}")

    alice.favorite_books.append("Book3")
    print(f"Original book count: {len(alice.favorite_books)}")
    print(f"Copy book count: {len(clone.favorite_books)}")

    node = Node("loop")
    node.next = node
    copier = GraphCopier(settings=CopySettings(log_stats=True))
    node_clone = copier.copy(node)
    print(f"Copy is self-referencing: {node_clone.next is node_clone}")
    print(f"Stats: {copier.last_stats.to_dict() if copier.last_stats else None}")


if __name__ == "__main__":
    main()
