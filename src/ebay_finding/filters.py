"""Query parameter accumulator for the Finding API's indexed filter convention."""

from dataclasses import dataclass, field


@dataclass
class FilterAccumulator:
    """Ordered multimap of query parameters.

    Item filters and output selectors are written as indexed keys, e.g.
    ``itemFilter(0).name`` / ``itemFilter(0).value(1)`` and
    ``outputSelector(0)``. Indexes start at 0 and never leave gaps.
    """

    params: dict[str, list[str]] = field(default_factory=dict)
    item_filter_index: int = 0
    output_selector_index: int = 0

    def add(self, name: str, value) -> None:
        """Append a flat key/value pair. Repeated keys keep every value."""
        self.params.setdefault(name, []).append(str(value))

    def add_item_filter(self, name: str, *values) -> None:
        """Add one indexed item filter group carrying all ``values``."""
        index = self.item_filter_index
        self.add(f"itemFilter({index}).name", name)
        for position, value in enumerate(values):
            self.add(f"itemFilter({index}).value({position})", value)
        self.item_filter_index += 1

    def add_output_selector(self, *values) -> None:
        """Add one output selector per value, each at its own index."""
        for value in values:
            self.add(f"outputSelector({self.output_selector_index})", value)
            self.output_selector_index += 1

    def items(self) -> list[tuple[str, str]]:
        """Flatten to ``(key, value)`` pairs in insertion order."""
        return [(key, value) for key, values in self.params.items() for value in values]

    def __len__(self) -> int:
        return sum(len(values) for values in self.params.values())
