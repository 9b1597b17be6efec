# models/config.py

import json
from dataclasses import dataclass, field, asdict

from models.errors import InvalidConfiguration
from models.states import SpreadMode

ROUNDS = 10          # Días simulados por corrida
DEFAULT_RUNS = 1000  # Corridas Monte Carlo por defecto

# Tablero por defecto del juego: (lugar, capacidad)
DEFAULT_VENUES = (
    ("sala de conciertos", 20),
    ("panadería", 4),
    ("colegio", 16),
    ("farmacia", 4),
    ("restaurante", 12),
    ("gimnasio", 8),
    ("supermercado", 4),
    ("centro comercial", 8),
)
DEFAULT_CAPACITIES = tuple(capacity for _, capacity in DEFAULT_VENUES)

COUNT_FIELDS = ("population", "infected", "vaccinated", "high_risk",
                "stage2", "stage3", "symptomatic")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Configuración inmutable de una simulación.

    population:        tamaño de la población
    infected:          infectados iniciales (día 1 de incubación)
    vaccinated:        vacunados (inmunes)
    high_risk:         sanos de alto riesgo
    group_capacities:  capacidades de los lugares habilitados cada día
    spread_mode:       regla de contagio dentro de un grupo
    stage2, stage3:    infectados que arrancan en el día 2 o 3 de incubación
    symptomatic:       enfermos desde el inicio (se quedan en casa)
    """
    population: int
    infected: int = 0
    vaccinated: int = 0
    high_risk: int = 0
    group_capacities: tuple = field(default_factory=tuple)
    spread_mode: SpreadMode = SpreadMode.INFECT_ONE
    stage2: int = 0
    stage3: int = 0
    symptomatic: int = 0

    def __post_init__(self):
        for name in COUNT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"'{name}' debe ser un entero, se recibió {value!r}")
            if value < 0:
                raise InvalidConfiguration(f"'{name}' no puede ser negativo ({value})")

        assigned = self.population - self.healthy
        if assigned > self.population:
            raise InvalidConfiguration(
                f"Los conteos iniciales suman {assigned} y superan la población ({self.population})"
            )

        try:
            capacities = tuple(self.group_capacities)
        except TypeError:
            raise InvalidConfiguration(
                f"'group_capacities' debe ser una secuencia, se recibió {self.group_capacities!r}"
            ) from None
        for capacity in capacities:
            if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
                raise InvalidConfiguration(f"Capacidad inválida: {capacity!r}")
        # frozen=True: se asigna a través de object.__setattr__
        object.__setattr__(self, "group_capacities", capacities)

        try:
            spread_mode = SpreadMode.parse(self.spread_mode)
        except ValueError:
            raise InvalidConfiguration(f"Modo de contagio desconocido: {self.spread_mode!r}") from None
        object.__setattr__(self, "spread_mode", spread_mode)

    @property
    def healthy(self):
        return (self.population - self.infected - self.vaccinated - self.high_risk
                - self.stage2 - self.stage3 - self.symptomatic)

    @classmethod
    def default(cls, closed=()):
        """
        Tablero del juego: 100 personas, 2 infectadas. 'closed' lista los
        lugares cerrados por nombre.
        """
        names = {name for name, _ in DEFAULT_VENUES}
        unknown = set(closed) - names
        if unknown:
            raise InvalidConfiguration(f"Lugares desconocidos: {sorted(unknown)}")
        capacities = tuple(capacity for name, capacity in DEFAULT_VENUES if name not in closed)
        return cls(population=100, infected=2, group_capacities=capacities,
                   spread_mode=SpreadMode.INFECT_ONE)

    @classmethod
    def from_dict(cls, data):
        known = set(COUNT_FIELDS) | {"group_capacities", "spread_mode"}
        unknown = set(data) - known
        if unknown:
            raise InvalidConfiguration(f"Claves desconocidas en la configuración: {sorted(unknown)}")
        if "population" not in data:
            raise InvalidConfiguration("Falta la clave 'population'")
        return cls(**data)

    @classmethod
    def from_json(cls, path):
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise InvalidConfiguration(f"JSON inválido en {path}: {exc}") from exc
        except OSError as exc:
            raise InvalidConfiguration(f"No se pudo leer {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise InvalidConfiguration(f"{path} debe contener un objeto JSON")
        return cls.from_dict(data)

    def as_dict(self):
        data = asdict(self)
        data["group_capacities"] = list(self.group_capacities)
        data["spread_mode"] = self.spread_mode.value
        return data
