from time import perf_counter
from typing import Optional

from algoritmo_de_busca.best_first_search import search
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from classes_de_elementos.search_result import SearchResult

def timed_search(graph: RoadGraph, heuristic: Optional[HeuristicTable],
                 start: str, goal: str) -> tuple[SearchResult, int]:
    '''
    Executa search() medindo o tempo de parede.

    Retorno
    -------
    (SearchResult, int) : resultado e tempo decorrido em microssegundos

    Observações
    -----------
    Erros de busca (UnknownNode, Unreachable, ...) são repassados ao chamador.
    '''

    started = perf_counter()
    result = search(graph, heuristic, start, goal)
    elapsed_micros = int((perf_counter() - started) * 1_000_000)
    return result, elapsed_micros
