import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import networkx as nx

from classes_de_elementos.erros import MissingHeuristic
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from funcoes_utilitarias._format_weight import _format_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeuristicViolation:
    '''
    Violação encontrada na tabela heurística para um destino 'goal'.
    - kind: "consistency" | "admissibility" | "missing"
    - node, neighbor: nós envolvidos (neighbor só em consistência)
    - h_node, bound: valor encontrado e o limite que ele deveria respeitar
    '''
    kind: str
    goal: str
    node: str
    neighbor: Optional[str] = None
    h_node: Optional[int] = None
    bound: Optional[int] = None

    def describe(self) -> str:
        if self.kind == "missing":
            return f"h({self.node}, {self.goal}) ausente"
        if self.kind == "consistency":
            return (f"h({self.node}, {self.goal})={_format_weight(self.h_node)} > "
                    f"w({self.node}, {self.neighbor}) + h({self.neighbor}, {self.goal})"
                    f"={_format_weight(self.bound)}")
        return (f"h({self.node}, {self.goal})={_format_weight(self.h_node)} > "
                f"distância real={_format_weight(self.bound)}")


def check_consistency(graph: RoadGraph, table: HeuristicTable,
                      goals: Optional[Iterable[str]] = None) -> List[HeuristicViolation]:
    '''
    Verifica h(u, g) <= w(u, v) + h(v, g) para toda aresta (nos dois sentidos) e todo destino.

    Parâmetros
    ----------
    graph : RoadGraph
    table : HeuristicTable
    goals : destinos a verificar (padrão: os que aparecem na tabela e existem no grafo)

    Retorno
    -------
    list[HeuristicViolation] : vazia se a tabela for consistente

    Observações
    -----------
    Só relata; nenhum valor é corrigido. Entradas ausentes viram violações "missing".
    '''
    violations: list[HeuristicViolation] = []
    for goal in _resolve_goals(graph, table, goals):
        missing_reported: set[str] = set()
        for u in graph.nodes():
            h_u = _lookup(table, u, goal, violations, missing_reported)
            if h_u is None:
                continue
            for v, weight in graph.neighbors(u):
                h_v = _lookup(table, v, goal, violations, missing_reported)
                if h_v is None:
                    continue
                if h_u > weight + h_v:
                    violations.append(HeuristicViolation(
                        kind="consistency", goal=goal, node=u, neighbor=v,
                        h_node=h_u, bound=weight + h_v,
                    ))
    return violations


def check_admissibility(graph: RoadGraph, table: HeuristicTable,
                        goals: Optional[Iterable[str]] = None) -> List[HeuristicViolation]:
    '''
    Verifica h(u, g) <= distância real(u, g), usando nx.single_source_dijkstra_path_length
    como referência independente. Nós que não alcançam g são ignorados.
    '''
    violations: list[HeuristicViolation] = []
    nx_graph = graph.as_networkx()
    for goal in _resolve_goals(graph, table, goals):
        true_distances = nx.single_source_dijkstra_path_length(nx_graph, goal, weight="weight")
        missing_reported: set[str] = set()
        for u, true_distance in true_distances.items():
            h_u = _lookup(table, u, goal, violations, missing_reported)
            if h_u is not None and h_u > true_distance:
                violations.append(HeuristicViolation(
                    kind="admissibility", goal=goal, node=u,
                    h_node=h_u, bound=true_distance,
                ))
    return violations


def validate_heuristic(graph: RoadGraph, table: HeuristicTable,
                       goals: Optional[Iterable[str]] = None) -> List[HeuristicViolation]:
    '''
    Consistência seguida de admissibilidade, sem repetir ausências já relatadas.
    '''
    goal_list = list(_resolve_goals(graph, table, goals))
    violations = check_consistency(graph, table, goal_list)
    seen = {(v.goal, v.node) for v in violations if v.kind == "missing"}
    for violation in check_admissibility(graph, table, goal_list):
        if violation.kind == "missing" and (violation.goal, violation.node) in seen:
            continue
        violations.append(violation)
    for violation in violations:
        logger.warning("Heurística: %s", violation.describe())
    return violations


def _resolve_goals(graph: RoadGraph, table: HeuristicTable,
                   goals: Optional[Iterable[str]]) -> List[str]:
    if goals is None:
        goals = table.goals()
    return [goal for goal in goals if graph.contains_node(goal)]


def _lookup(table: HeuristicTable, node: str, goal: str,
            violations: list[HeuristicViolation], missing_reported: set[str]) -> Optional[int]:
    try:
        return table.h(node, goal)
    except MissingHeuristic:
        if node not in missing_reported:
            missing_reported.add(node)
            violations.append(HeuristicViolation(kind="missing", goal=goal, node=node))
        return None
