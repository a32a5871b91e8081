import re
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

LINE_REGEX = re.compile(
    "^Valve ([A-Z]{2}) has flow rate=([0-9]+); "
    "(?:tunnels lead to valves|tunnel leads to valve) "
    "([A-Z]{2}(?:, [A-Z]{2})*)$"
)
MAX_NAME = 26**2


class ParseError(ValueError):
    def __init__(self, line_number: int, line: str):
        super().__init__(f"Line {line_number} is not a valve record: {line!r}")
        self.line_number = line_number
        self.line = line


@dataclass(frozen=True, order=True)
class Name:
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 2 or not all("A" <= c <= "Z" for c in self.value):
            raise ValueError(f"Valve names are two uppercase letters, got {self.value!r}")

    @property
    def index(self) -> int:
        """Position of this name in [0, 26**2)"""
        a, b = self.value
        return (ord(a) - ord("A")) * 26 + (ord(b) - ord("A"))

    @classmethod
    def from_index(cls, index: int) -> "Name":
        if not 0 <= index < MAX_NAME:
            raise ValueError(f"Name index out of range: {index}")
        return cls(chr(index // 26 + ord("A")) + chr(index % 26 + ord("A")))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


T = TypeVar("T")


class NameMap(Generic[T]):
    """Fixed-size table with one slot per possible valve name.

    Iteration is always in name index order (AA, AB, ..., ZZ), independent
    of insertion order.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[Optional[T]] = [None] * MAX_NAME

    def get(self, name: Name) -> Optional[T]:
        return self._values[name.index]

    def insert(self, name: Name, value: T) -> None:
        self._values[name.index] = value

    def contains(self, name: Name) -> bool:
        return self._values[name.index] is not None

    def is_empty(self) -> bool:
        return all(value is None for value in self._values)

    def items(self) -> Iterator[tuple[Name, T]]:
        for i, value in enumerate(self._values):
            if value is not None:
                yield Name.from_index(i), value

    def keys(self) -> Iterator[Name]:
        for name, _ in self.items():
            yield name

    def copy(self) -> "NameMap[T]":
        result: NameMap[T] = NameMap()
        result._values = self._values.copy()
        return result

    def __contains__(self, name: Name) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return sum(1 for value in self._values if value is not None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameMap):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return "NameMap({" + ", ".join(f"{k}: {v!r}" for k, v in self.items()) + "})"


@dataclass(frozen=True)
class Valve:
    name: Name
    flow: int
    links: tuple[Name, ...]

    @classmethod
    def parse(cls, line: str, line_number: int = 1) -> "Valve":
        # Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
        match = LINE_REGEX.fullmatch(line.rstrip("\n"))
        if match is None:
            raise ParseError(line_number, line)
        name, flow_str, links_str = match.groups()
        return cls(
            name=Name(name),
            flow=int(flow_str),
            links=tuple(Name(link) for link in links_str.split(", ")),
        )


def parse_line(line: str) -> Valve:
    return Valve.parse(line)


def parse(text: str) -> list[Valve]:
    results: list[Valve] = []
    for i, line in enumerate(text.splitlines()):
        results.append(Valve.parse(line, line_number=i + 1))
    return results
