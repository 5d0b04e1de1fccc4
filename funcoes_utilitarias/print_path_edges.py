from classes_de_elementos.edge import Edge
from constantes.constantes import DISTANCE_UNIT
from funcoes_utilitarias._format_weight import _format_weight

def print_path_edges(path_edges: list[Edge], total_distance: int, label_total: str,
                     out=print) -> None:
    '''
    Imprime a sequência de trechos com a distância de cada um e, ao final,
    a distância total do caminho.

    Parâmetros
    ----------
    path_edges     : list[Edge] (na ordem origem→destino)
    total_distance : int (décimos)
    label_total    : str (rótulo do total, ex.: "Dijkstra" ou "A*")
    out            : função de saída (padrão: print)
    '''

    for edge in path_edges:
        out(f"Siga de {edge.u} para {edge.v}: {_format_weight(edge.w)} {DISTANCE_UNIT}.")
    out(f"Distância total ({label_total}): {_format_weight(total_distance)} {DISTANCE_UNIT}.")
