from constantes.constantes import FIXED_POINT_SCALE


def decode_weight(weight: int) -> float:
    '''
    Converte um peso em décimos de volta para a distância decimal.

    Parâmetros
    ----------
    weight : int (décimos)

    Retorno
    -------
    float : weight / 10
    '''

    return weight / FIXED_POINT_SCALE
