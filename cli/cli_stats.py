from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph

def cli_stats(graph: RoadGraph, table: HeuristicTable) -> int:
    '''
    Imprime estatísticas básicas: |V|, |E| e o número de entradas da heurística.

    Parâmetros
    ----------
    graph : RoadGraph
    table : HeuristicTable

    Retorno
    -------
    int : 0
    '''

    print(f"RoadGraph |V|={graph.node_count()} |E|={graph.edge_count()}")
    print(f"HeuristicTable entradas={len(table)} destinos={len(table.goals())}")
    return 0
