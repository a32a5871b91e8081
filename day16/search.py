from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, Optional, Union

from day16.network import Network, Path
from day16.parse import Name, NameMap

MAX_TIME = 30
START = "AA"
NUM_ACTORS = 1  # 0 = ourselves, 1 would be the elephant


@dataclass(frozen=True)
class Move:
    target: Name
    path: Path

    def cost(self) -> int:
        travel_turns = len(self.path)
        open_turns = 1
        return travel_turns + open_turns


@dataclass
class InProgressMove:
    move: Move
    turns: int = 0


@dataclass
class Actor:
    position: Name
    in_progress_move: Optional[InProgressMove] = None

    def clone(self) -> "Actor":
        if self.in_progress_move is None:
            return replace(self)
        return replace(self, in_progress_move=replace(self.in_progress_move))

    def step(self, net: Network, state: "State") -> None:
        """Advance one turn along the current move, opening the target valve
        on the turn the move completes."""
        im = self.in_progress_move
        if im is None:
            return
        target = im.move.target
        if im.turns + 1 >= im.move.cost():
            self.in_progress_move = None
            self.position = target
            state.open_valves.insert(target, True)
            state.pressure_per_turn += net.valve(target).flow
        else:
            _from, to = im.move.path[im.turns]
            self.position = to
            im.turns += 1


@dataclass
class State:
    net: Network
    max_turns: int
    actors: list[Actor]
    turn: int = 0
    pressure: int = 0
    pressure_per_turn: int = 0
    open_valves: NameMap[bool] = field(default_factory=NameMap)

    def clone(self) -> "State":
        return replace(
            self,
            actors=[actor.clone() for actor in self.actors],
            open_valves=self.open_valves.copy(),
        )

    def turns_left(self) -> int:
        return self.max_turns - self.turn

    def moves(self, position: Name) -> Iterator[Move]:
        """All moves from position to a valve that is still closed"""
        for name, (path, _flow) in self.net.connections_of(position).items():
            if self.open_valves.contains(name):
                continue
            yield Move(target=name, path=path)

    def opened(self) -> list[Name]:
        return list(self.open_valves.keys())

    def step(self) -> bool:
        self.pressure += self.pressure_per_turn
        self.turn += 1
        return self.turn < self.max_turns

    def _candidates(self) -> list[InProgressMove]:
        actor = self.actors[0]
        if actor.in_progress_move is not None:
            mv = actor.in_progress_move
            actor.in_progress_move = None
            return [mv]
        return [
            InProgressMove(mv)
            for mv in self.moves(actor.position)
            if mv.cost() <= self.turns_left()
        ]

    def _branch(self, mv: InProgressMove) -> "State":
        next_state = self.clone()
        actor = next_state.actors[0]
        actor.in_progress_move = replace(mv)
        actor.step(next_state.net, next_state)
        return next_state


def run_manual(start: State) -> State:
    state = start.clone()
    if not state.step():
        # all done
        return state

    best_state: Optional[State] = None
    for mv in state._candidates():
        end_state = run_manual(state._branch(mv))
        if best_state is None or end_state.pressure > best_state.pressure:
            best_state = end_state

    if best_state is None:
        # no moves possible, just wait it out
        return run_manual(state)
    return best_state


def run_max_by_key(start: State) -> State:
    state = start.clone()
    if not state.step():
        return state

    outcomes = [run_max_by_key(state._branch(mv)) for mv in state._candidates()]
    if not outcomes:
        return run_max_by_key(state)
    return max(outcomes, key=lambda s: s.pressure)


STRATEGIES: dict[str, Callable[[State], State]] = {
    "manual": run_manual,
    "max_by_key": run_max_by_key,
}


def initial_state(
    net: Network, max_turns: int = MAX_TIME, start: Union[str, Name] = START
) -> State:
    position = start if isinstance(start, Name) else Name(start)
    return State(
        net=net,
        max_turns=max_turns,
        actors=[Actor(position=position) for _ in range(NUM_ACTORS)],
    )


def best_state(
    net: Network,
    max_turns: int = MAX_TIME,
    start: Union[str, Name] = START,
    strategy: str = "manual",
) -> State:
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy {strategy!r}, expected one of {sorted(STRATEGIES)}"
        )
    return STRATEGIES[strategy](initial_state(net, max_turns, start))


def best_pressure(
    net: Network,
    max_turns: int = MAX_TIME,
    start: Union[str, Name] = START,
    strategy: str = "manual",
) -> int:
    return best_state(net, max_turns, start, strategy).pressure
