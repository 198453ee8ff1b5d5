# shallnotcollide/simulation/airports.py
import random
from typing import Iterable, Iterator, List, Tuple

from .data_models import Airport
from .exceptions import InvalidConfigurationError, UnknownAirportError

TUNISIAN_AIRPORTS: Tuple[Airport, ...] = (
    Airport(name='Tunis-Carthage', lat=36.851, lon=10.227),
    Airport(name='Enfidha', lat=36.075, lon=10.438),
    Airport(name='Sfax', lat=34.717, lon=10.690),
    Airport(name='Djerba', lat=33.875, lon=10.775),
    Airport(name='Tozeur', lat=33.930, lon=8.130),
)

class AirportRegistry:
    """Fixed, ordered set of airports aircraft are routed between."""

    def __init__(self, airports: Iterable[Airport] = TUNISIAN_AIRPORTS):
        self._airports = tuple(airports)
        if not self._airports:
            raise InvalidConfigurationError("airports", self._airports,
                                            message="Airport registry cannot be empty")
        self._by_name = {airport.name: airport for airport in self._airports}

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._airports)

    def get(self, name: str) -> Airport:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownAirportError(name) from None

    def names(self) -> List[str]:
        return [airport.name for airport in self._airports]

    def random_choice(self, rng: random.Random) -> Airport:
        """Uniform draw; the same airport may come up twice in a row."""
        return rng.choice(self._airports)
