# services/propagator.py

from collections import namedtuple

from models.states import HealthState, SpreadMode

GroupOutcome = namedtuple("GroupOutcome", ["infectious_count", "newly_infected"])


class InfectionPropagator:
    """
    Reglas de progresión y contagio aplicadas a un grupo ya formado.
    """
    def __init__(self, spread_mode=SpreadMode.INFECT_ONE, logger=None):
        self.spread_mode = SpreadMode.parse(spread_mode)
        self.logger = logger

    def progress(self, population, members):
        """
        Avanza una etapa a cada miembro en incubación.
        Retorna cuántos estaban en incubación antes de avanzar.
        """
        infectious_count = 0
        for idx in members:
            state = population[idx]
            if state.is_incubating:
                infectious_count += 1
                population[idx] = state.advanced()
        return infectious_count

    def propagate_group(self, population, group):
        infectious_count = self.progress(population, group)
        newly_infected = []
        if infectious_count == 0:
            return GroupOutcome(0, newly_infected)

        # Vacunados excluidos: sólo sanos y sanos de alto riesgo
        susceptible = [idx for idx in group if population[idx].is_susceptible]
        if self.spread_mode is SpreadMode.INFECT_ONE:
            susceptible = susceptible[:infectious_count]

        for idx in susceptible:
            population[idx] = HealthState.STAGE1
            newly_infected.append(idx)

        if self.logger is not None and newly_infected:
            self.logger.debug(
                f"Grupo de {len(group)}: {infectious_count} infecciosos contagiaron a {len(newly_infected)}."
            )
        return GroupOutcome(infectious_count, newly_infected)

    def progress_remainder(self, population, remainder):
        """
        Quienes no asistieron a ningún grupo sólo progresan; no hay contagio.
        """
        self.progress(population, remainder)
