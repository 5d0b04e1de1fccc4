from algoritmo_de_busca.heuristic_validation import validate_heuristic
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph

def cli_validate(graph: RoadGraph, table: HeuristicTable) -> int:
    '''
    Verifica a heurística para todos os destinos presentes na tabela e imprime
    cada violação (consistência, admissibilidade ou entrada ausente).

    Retorno
    -------
    int : 0 se não houver violações; 1 caso contrário
    '''

    violations = validate_heuristic(graph, table)
    for violation in violations:
        print(violation.describe())
    if violations:
        print(f"{len(violations)} violação(ões) encontrada(s).")
        return 1
    print("Heurística consistente e admissível.")
    return 0
