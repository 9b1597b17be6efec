# models/population.py

from models.states import HealthState


class Population:
    """
    Población de tamaño fijo. El índice de cada posición es la identidad del
    individuo; sólo cambia su estado de salud.
    """
    def __init__(self, states):
        self.states = list(states)

    @classmethod
    def generate(cls, config):
        """
        Arma la población inicial a partir de los conteos de la configuración.
        El orden es irrelevante: toda selección posterior es por índice aleatorio.
        """
        states = [HealthState.VACCINATED] * config.vaccinated
        states += [HealthState.HIGH_RISK_HEALTHY] * config.high_risk
        states += [HealthState.STAGE1] * config.infected
        states += [HealthState.STAGE2] * config.stage2
        states += [HealthState.STAGE3] * config.stage3
        states += [HealthState.SYMPTOMATIC] * config.symptomatic
        states += [HealthState.HEALTHY] * config.healthy
        return cls(states)

    def __len__(self):
        return len(self.states)

    def __getitem__(self, index):
        return self.states[index]

    def __setitem__(self, index, state):
        self.states[index] = state

    def __iter__(self):
        return iter(self.states)

    def eligible_indices(self):
        """
        Individuos que pueden salir de casa (todos menos los sintomáticos).
        """
        return [i for i, st in enumerate(self.states) if st is not HealthState.SYMPTOMATIC]

    def counts(self):
        """
        Retorna cuántos individuos hay en cada estado.
        """
        counts = {st: 0 for st in HealthState}
        for st in self.states:
            counts[st] += 1
        return counts

    def snapshot(self):
        return tuple(self.states)
