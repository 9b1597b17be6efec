# services/partitioner.py

import random


def swap_remove(items, index):
    """
    Quita y retorna items[index] en O(1): el último elemento ocupa su lugar.
    """
    last = items.pop()
    if index == len(items):
        return last
    removed = items[index]
    items[index] = last
    return removed


class GroupPartitioner:
    """
    Reparte aleatoriamente el pool de individuos elegibles en grupos, uno por
    capacidad sorteada, muestreando sin reemplazo.
    """
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def iter_groups(self, pool, capacities):
        """
        Genera grupos hasta agotar las capacidades o el pool.

        Consume ambas listas: al terminar, 'pool' contiene el remanente que no
        entró en ningún grupo.
        """
        while capacities and pool:
            capacity = swap_remove(capacities, self.rng.randrange(len(capacities)))
            size = min(capacity, len(pool))
            group = [swap_remove(pool, self.rng.randrange(len(pool))) for _ in range(size)]
            yield capacity, group

    def partition(self, pool, capacities):
        """
        Versión sin efectos laterales: retorna (grupos, remanente).
        """
        pool = list(pool)
        capacities = list(capacities)
        groups = [group for _, group in self.iter_groups(pool, capacities)]
        return groups, pool
