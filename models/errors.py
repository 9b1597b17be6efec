# models/errors.py


class InvalidConfiguration(ValueError):
    """
    Configuración inconsistente: conteos negativos, suma mayor que la población,
    capacidades no positivas o modo de contagio desconocido.
    """
