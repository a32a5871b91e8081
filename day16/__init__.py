from day16.network import Network, ValveNotFound
from day16.parse import Name, NameMap, ParseError, Valve, parse
from day16.search import best_pressure, initial_state, run_manual, run_max_by_key

__all__ = [
    "Name",
    "NameMap",
    "Network",
    "ParseError",
    "Valve",
    "ValveNotFound",
    "best_pressure",
    "initial_state",
    "parse",
    "run_manual",
    "run_max_by_key",
]
