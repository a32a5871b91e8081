from pathlib import Path as FilePath
from typing import Iterable, Iterator, Union

from day16.parse import Name, NameMap, Valve, parse

Hop = tuple[Name, Name]
Path = tuple[Hop, ...]
Connections = NameMap[tuple[Path, int]]


class ValveNotFound(AssertionError):
    def __init__(self, name: Name):
        super().__init__(f"Valve {name} is not in the network")
        self.name = name


class Network:
    def __init__(self) -> None:
        self.valves: NameMap[tuple[Valve, Connections]] = NameMap()

    @classmethod
    def from_valves(cls, valves: Iterable[Valve]) -> "Network":
        net = cls()
        for valve in valves:
            net.valves.insert(valve.name, (valve, NameMap()))
        for name in list(net.valves.keys()):
            valve = net.valve(name)
            net.valves.insert(name, (valve, net.connections(name)))
        return net

    @classmethod
    def from_text(cls, text: str) -> "Network":
        return cls.from_valves(parse(text))

    @classmethod
    def from_file(cls, path: Union[str, FilePath]) -> "Network":
        with open(path, "r") as f:
            return cls.from_text(f.read())

    def valve(self, name: Name) -> Valve:
        entry = self.valves.get(name)
        if entry is None:
            raise ValveNotFound(name)
        return entry[0]

    def connections_of(self, name: Name) -> Connections:
        entry = self.valves.get(name)
        if entry is None:
            raise ValveNotFound(name)
        return entry[1]

    def connections(self, start: Name) -> Connections:
        """Shortest paths from start to every reachable valve with a positive
        flow. Valves with no flow are only walked through."""
        current: Connections = NameMap()
        current.insert(start, ((), self.valve(start).flow))
        connections = current.copy()

        while not current.is_empty():
            next_layer: Connections = NameMap()
            for name, (path, _flow) in current.items():
                for link in self.valve(name).links:
                    if connections.contains(link):
                        # Already found a path at least as short
                        continue
                    item = (path + ((name, link),), self.valve(link).flow)
                    connections.insert(link, item)
                    next_layer.insert(link, item)
            current = next_layer

        result: Connections = NameMap()
        for name, (path, flow) in connections.items():
            if flow > 0 and name != start:
                result.insert(name, (path, flow))
        return result

    def names(self) -> Iterator[Name]:
        return self.valves.keys()

    def __contains__(self, name: Name) -> bool:
        return self.valves.contains(name)

    def __len__(self) -> int:
        return len(self.valves)
