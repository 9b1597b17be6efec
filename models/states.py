# models/states.py

from enum import Enum, auto


class HealthState(Enum):
    VACCINATED = auto()         # Vacunado (inmune)
    HIGH_RISK_HEALTHY = auto()  # Sano de alto riesgo
    HEALTHY = auto()            # Sano
    STAGE1 = auto()             # Infectado, día 1 de incubación
    STAGE2 = auto()             # Infectado, día 2 de incubación
    STAGE3 = auto()             # Infectado, día 3 de incubación
    SYMPTOMATIC = auto()        # Enfermo (terminal, se queda en casa)

    @property
    def is_susceptible(self):
        return self in (HealthState.HIGH_RISK_HEALTHY, HealthState.HEALTHY)

    @property
    def is_incubating(self):
        return self in _NEXT_STAGE

    @property
    def is_healthy(self):
        return self is HealthState.VACCINATED or self.is_susceptible

    @property
    def rank(self):
        """
        Índice de progresión: nunca disminuye para un individuo.
        """
        return _RANK[self]

    def advanced(self):
        """
        Siguiente etapa de incubación. Los estados sanos y el sintomático no cambian.
        """
        return _NEXT_STAGE.get(self, self)


class SpreadMode(Enum):
    INFECT_ALL = "infect_all"  # Contagia a todos los susceptibles del grupo
    INFECT_ONE = "infect_one"  # Cada infeccioso contagia como máximo a uno

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        aliases = {"all": cls.INFECT_ALL, "one": cls.INFECT_ONE}
        if key in aliases:
            return aliases[key]
        return cls(key)


_NEXT_STAGE = {
    HealthState.STAGE1: HealthState.STAGE2,
    HealthState.STAGE2: HealthState.STAGE3,
    HealthState.STAGE3: HealthState.SYMPTOMATIC,
}

_RANK = {
    HealthState.VACCINATED: 0,
    HealthState.HIGH_RISK_HEALTHY: 0,
    HealthState.HEALTHY: 0,
    HealthState.STAGE1: 1,
    HealthState.STAGE2: 2,
    HealthState.STAGE3: 3,
    HealthState.SYMPTOMATIC: 4,
}
