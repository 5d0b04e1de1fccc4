from funcoes_utilitarias.decode_weight import decode_weight


def _format_weight(weight: int) -> str:
    '''
    Formata um peso em décimos com exatamente uma casa decimal.

    Parâmetros
    ----------
    weight : int

    Retorno
    -------
    str : ex.: 15 -> "1.5", 20 -> "2.0"
    '''

    return f"{decode_weight(weight):.1f}"
