import enum
import logging
from typing import Callable, Dict, Optional

from classes_de_elementos.erros import (
    RouteError,
    SearchInvariantError,
    UnknownNode,
    Unreachable,
)
from classes_de_elementos.frontier import Frontier
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from classes_de_elementos.search_result import SearchResult
from constantes.constantes import MODE_ASTAR, MODE_DIJKSTRA

logger = logging.getLogger(__name__)


class SearchStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


class RouteSearch:
    '''
    Uma execução de busca best-first entre dois locais do grafo.

    - Dijkstra: f(n) = dist[n]
    - A*:       f(n) = dist[n] + h(n, destino)

    Ciclo de vida: IDLE -> RUNNING -> (DONE | FAILED); run() só pode ser
    chamado uma vez. Em DONE, 'result' guarda o SearchResult; em FAILED,
    'error' guarda a exceção (que também é relançada por run()).

    Observações
    -----------
    - O teste de destino é feito no pop, não na inserção: o primeiro pop do
      destino é ótimo com pesos não negativos e heurística consistente.
    - A relaxação usa '<' estrito, então empates mantêm o predecessor antigo.
    - Todo o estado (dist, prev, fronteira, contador) é local à instância.
    '''
    def __init__(self, graph: RoadGraph, heuristic: Optional[HeuristicTable],
                 start: str, goal: str) -> None:
        self.graph = graph
        self.heuristic = heuristic
        self.start = start
        self.goal = goal
        self.mode = MODE_DIJKSTRA if heuristic is None else MODE_ASTAR
        self.status = SearchStatus.IDLE
        self.result: Optional[SearchResult] = None
        self.error: Optional[RouteError] = None

        self._dist: Dict[str, int] = {}
        self._prev: Dict[str, str] = {}
        self._expanded = 0

    def _priority_function(self) -> Callable[[str, int], int]:
        if self.heuristic is None:
            return lambda node, g: g
        table, goal = self.heuristic, self.goal
        return lambda node, g: g + table.h(node, goal)

    def run(self) -> SearchResult:
        '''
        Executa a busca até o destino ou até esvaziar a fronteira.

        Retorno
        -------
        SearchResult : caminho, distância (décimos) e nós expandidos

        Exceções
        --------
        UnknownNode, Unreachable, MissingHeuristic, SearchInvariantError
        '''
        if self.status is not SearchStatus.IDLE:
            raise RuntimeError(f"RouteSearch já executada (estado {self.status.value}).")
        self.status = SearchStatus.RUNNING
        try:
            self.result = self._search()
        except RouteError as exc:
            self.status = SearchStatus.FAILED
            self.error = exc
            logger.debug("%s %s -> %s falhou: %s", self.mode, self.start, self.goal, exc)
            raise
        self.status = SearchStatus.DONE
        logger.debug("%s %s -> %s: distância=%d expandidos=%d",
                     self.mode, self.start, self.goal, self.result.distance, self.result.expanded)
        return self.result

    def _search(self) -> SearchResult:
        missing = [label for label in dict.fromkeys((self.start, self.goal))
                   if not self.graph.contains_node(label)]
        if missing:
            raise UnknownNode(missing)

        f = self._priority_function()
        dist, prev = self._dist, self._prev
        frontier = Frontier()

        dist[self.start] = 0
        frontier.push_or_improve(self.start, f(self.start, 0))

        while frontier:
            current_node, priority = frontier.pop_min()
            if f(current_node, dist[current_node]) != priority:
                continue  # prioridade obsoleta
            self._expanded += 1

            if current_node == self.goal:
                return SearchResult(
                    path=self._reconstruct_path(),
                    distance=dist[self.goal],
                    expanded=self._expanded,
                    mode=self.mode,
                )

            for neighbor, weight in self.graph.neighbors(current_node):
                alt = dist[current_node] + weight
                if neighbor not in dist or alt < dist[neighbor]:
                    dist[neighbor] = alt
                    prev[neighbor] = current_node
                    frontier.push_or_improve(neighbor, f(neighbor, alt))

        raise Unreachable(self.start, self.goal, self._expanded)

    def _reconstruct_path(self) -> tuple[str, ...]:
        '''
        Caminha por prev a partir do destino até o nó sem predecessor e inverte.

        Observações
        -----------
        A caminhada é limitada a |V| passos; ciclo ou término fora da origem
        levantam SearchInvariantError.
        '''
        path = [self.goal]
        node_cursor = self.goal
        limit = self.graph.node_count()
        while node_cursor in self._prev:
            node_cursor = self._prev[node_cursor]
            path.append(node_cursor)
            if len(path) > limit:
                raise SearchInvariantError(
                    f"Ciclo no mapa de predecessores a partir de {self.goal}")
        if node_cursor != self.start:
            raise SearchInvariantError(
                f"Reconstrução terminou em {node_cursor}, esperado {self.start}")
        path.reverse()
        return tuple(path)


def search(graph: RoadGraph, heuristic: Optional[HeuristicTable],
           start: str, goal: str) -> SearchResult:
    '''
    Caminho mais curto de 'start' a 'goal'; A* se 'heuristic' for dado, Dijkstra caso contrário.
    '''
    return RouteSearch(graph, heuristic, start, goal).run()
