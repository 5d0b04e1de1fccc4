from dataclasses import dataclass

@dataclass(frozen=True)
class Edge:
    '''
    Trecho u->v percorrido em uma rota, com:
    - u (origem do trecho), v (destino do trecho)
    - w (peso em décimos, ver encode_weight)

    Observações
    -----------
    O grafo é não dirigido; Edge só registra o sentido em que o trecho foi
    percorrido no caminho reconstruído.
    '''
    u: str
    v: str
    w: int
