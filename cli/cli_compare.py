from classes_de_elementos.erros import RouteError, UnknownNode
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from constantes.constantes import DISTANCE_UNIT, MODE_ASTAR, MODE_DIJKSTRA
from funcoes_utilitarias._format_weight import _format_weight
from funcoes_utilitarias.print_path_edges import print_path_edges
from funcoes_utilitarias.timed_search import timed_search

def run_comparison(graph: RoadGraph, table: HeuristicTable,
                   origin: str, destination: str, out=print) -> bool:
    '''
    Executa A* e depois Dijkstra para a mesma consulta e imprime, para cada
    modo, os nós considerados; a rota trecho a trecho (A*); e ao final os
    tempos de cálculo em microssegundos.

    Parâmetros
    ----------
    graph       : RoadGraph
    table       : HeuristicTable
    origin      : str
    destination : str
    out         : função de saída (padrão: print)

    Retorno
    -------
    bool : True se os dois modos encontraram rota

    Observações
    -----------
    - Local inexistente gera uma única linha de diagnóstico e nenhuma busca.
    - Demais erros (Unreachable, MissingHeuristic) são tratados igualmente
      nos dois modos: uma linha por modo, e o outro modo ainda é executado.
    '''

    missing = [label for label in dict.fromkeys((origin, destination))
               if not graph.contains_node(label)]
    if missing:
        out(str(UnknownNode(missing)))
        return False

    timings: list[tuple[str, int]] = []
    for mode, heuristic in ((MODE_ASTAR, table), (MODE_DIJKSTRA, None)):
        out(f"\nExecutando {mode}...")
        try:
            result, elapsed_micros = timed_search(graph, heuristic, origin, destination)
        except RouteError as exc:
            out(str(exc))
            continue
        out(f"{result.expanded} nós considerados")
        if mode == MODE_ASTAR:
            print_path_edges(graph.path_edges(result.path), result.distance, mode, out=out)
        else:
            out(f"Distância total ({mode}): {_format_weight(result.distance)} {DISTANCE_UNIT}.")
        timings.append((mode, elapsed_micros))

    if timings:
        out("--")
        for mode, elapsed_micros in timings:
            out(f"Tempo de cálculo do {mode}: {elapsed_micros} micros.")
    return len(timings) == 2


def cli_compare(graph: RoadGraph, table: HeuristicTable, origin: str, destination: str) -> int:
    '''
    Comando "compare": uma consulta, sem laço.

    Retorno
    -------
    int : 0 se os dois modos encontraram rota; 1 caso contrário
    '''

    return 0 if run_comparison(graph, table, origin, destination) else 1
