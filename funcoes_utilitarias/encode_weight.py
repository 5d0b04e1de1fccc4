import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext

from classes_de_elementos.erros import InvalidWeight
from constantes.constantes import FIXED_POINT_SCALE

_ONE_DECIMAL = Decimal(1) / Decimal(FIXED_POINT_SCALE)


def encode_weight(distance: float | int | str | Decimal) -> int:
    '''
    Converte uma distância decimal para inteiro em décimos (ponto fixo).

    Parâmetros
    ----------
    distance : float | int | str | Decimal (ex.: 1.5, "1.5")

    Retorno
    -------
    int : round(distance × 10), ex.: 1.5 -> 15

    Observações
    -----------
    - Arredondamento bancário (meio para o par) sobre o valor decimal exato
      do float, o mesmo critério de round(x, 1). Assim
      decode_weight(encode_weight(x)) == round(x, 1).
    - Negativos, NaN e infinitos levantam InvalidWeight.
    '''

    if isinstance(distance, bool):
        raise InvalidWeight(f"Distância inválida: {distance!r}")
    try:
        if isinstance(distance, str):
            value = Decimal(distance.strip())
        elif isinstance(distance, Decimal):
            value = distance
        elif isinstance(distance, int):
            value = Decimal(distance)
        else:
            as_float = float(distance)
            if not math.isfinite(as_float):
                raise InvalidWeight(f"Distância não finita: {distance!r}")
            value = Decimal(as_float)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidWeight(f"Distância inválida: {distance!r}") from exc

    if not value.is_finite():
        raise InvalidWeight(f"Distância não finita: {distance!r}")
    if value < 0:
        raise InvalidWeight(f"Distância negativa: {distance!r}")

    try:
        with localcontext() as ctx:
            # dígitos inteiros + 1 decimal + o fator de escala
            ctx.prec = max(ctx.prec, value.adjusted() + 4)
            tenths = value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_EVEN) * FIXED_POINT_SCALE
    except ArithmeticError as exc:
        raise InvalidWeight(f"Distância fora do intervalo representável: {distance!r}") from exc
    return int(tenths)
