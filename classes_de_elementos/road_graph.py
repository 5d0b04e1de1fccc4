import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from classes_de_elementos.edge import Edge
from classes_de_elementos.erros import InvalidWeight
from funcoes_utilitarias.parse_routes_file import parse_routes_file

logger = logging.getLogger(__name__)


class RoadGraph:
    '''
    Representa o grafo não dirigido e ponderado G=(V,E) carregado do arquivo de rotas.
    - nós: rótulos (str), sensíveis a maiúsculas
    - arestas: pares não ordenados {u, v} com atributo 'weight' em décimos (int)

    Observações
    -----------
    O armazenamento é um nx.Graph. Após a carga o grafo é congelado
    (nx.freeze); qualquer add_edge posterior levanta RuntimeError.
    '''
    def __init__(self) -> None:
        '''
        Inicializa o grafo vazio (ainda mutável).
        '''
        self._graph: nx.Graph = nx.Graph()

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str, int]]) -> "RoadGraph":
        '''
        Constrói e congela um grafo a partir de triplas (u, v, peso_em_décimos).

        Parâmetros
        ----------
        edges : Iterable[tuple[str, str, int]]

        Retorno
        -------
        RoadGraph : instância congelada
        '''
        graph = cls()
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        graph.freeze()
        return graph

    @classmethod
    def load_graph(cls, routes_path: str) -> "RoadGraph":
        '''
        Lê o arquivo de rotas "(origem, destino, distância)" e constrói o grafo.

        Parâmetros
        ----------
        routes_path : caminho do arquivo de rotas

        Retorno
        -------
        RoadGraph : instância congelada, pronta para consulta
        '''
        graph = cls.from_edges(parse_routes_file(routes_path))
        logger.info("Grafo carregado de %s: |V|=%d |E|=%d",
                    routes_path, graph.node_count(), graph.edge_count())
        return graph

    def add_edge(self, u: str, v: str, w: int) -> None:
        '''
        Insere (ou substitui) a aresta {u, v} com peso w; insere u e v implicitamente.

        Parâmetros
        ----------
        u, v : str (rótulos dos extremos)
        w    : int (peso em décimos, >= 0)

        Observações
        -----------
        Reinserir com o mesmo peso não altera nada; com peso diferente, vale o
        último (registrado como warning).
        '''
        if self.is_frozen:
            raise RuntimeError("RoadGraph congelado: o grafo não aceita mutações após a carga.")
        if isinstance(w, bool) or not isinstance(w, int):
            raise InvalidWeight(f"Peso deve ser inteiro em décimos, recebido {w!r}")
        if w < 0:
            raise InvalidWeight(f"Peso negativo na aresta {u}-{v}: {w}")

        current = self.edge_weight(u, v)
        if current is not None and current != w:
            logger.warning("Aresta %s-%s redefinida: %d -> %d", u, v, current, w)
        self._graph.add_edge(u, v, weight=w)

    def freeze(self) -> None:
        nx.freeze(self._graph)

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    def contains_node(self, node: str) -> bool:
        return node in self._graph

    def nodes(self) -> List[str]:
        '''
        Lista os rótulos na ordem de inserção (estável dentro do processo).
        '''
        return list(self._graph.nodes)

    def neighbors(self, node: str) -> List[Tuple[str, int]]:
        '''
        Retorna cada aresta incidente a 'node' exatamente uma vez.

        Parâmetros
        ----------
        node : str

        Retorno
        -------
        list[tuple[str, int]] : (outro extremo, peso em décimos); vazia se o nó não existir
        '''
        if node not in self._graph:
            return []
        return [(other, data["weight"]) for other, data in self._graph.adj[node].items()]

    def edge_weight(self, u: str, v: str) -> Optional[int]:
        '''
        Peso da aresta {u, v} em décimos, ou None se a aresta não existir.
        '''
        data = self._graph.get_edge_data(u, v)
        if data is None:
            return None
        return data["weight"]

    def path_edges(self, path: Sequence[str]) -> List[Edge]:
        '''
        Converte uma sequência de nós na lista de trechos (u, v, w) consecutivos.

        Parâmetros
        ----------
        path : sequência de nós (na ordem origem→destino)

        Retorno
        -------
        list[Edge] : um trecho por par consecutivo

        Observações
        -----------
        Levanta KeyError se algum par consecutivo não for aresta do grafo.
        '''
        path_edges: list[Edge] = []
        for u, v in zip(path[:-1], path[1:]):
            w = self.edge_weight(u, v)
            if w is None:
                raise KeyError(f"Não há aresta entre {u} e {v}")
            path_edges.append(Edge(u=u, v=v, w=w))
        return path_edges

    def edge_count(self) -> int:
        '''
        Calcula a quantidade total de arestas do grafo.

        Retorno
        -------
        int : |E| (cada par não ordenado conta uma vez)
        '''
        return self._graph.number_of_edges()

    def node_count(self) -> int:
        '''
        Calcula a quantidade total de nós do grafo.

        Retorno
        -------
        int : |V|
        '''
        return self._graph.number_of_nodes()

    def as_networkx(self) -> nx.Graph:
        '''
        Visão somente leitura do grafo subjacente (usada na validação da heurística).
        '''
        return self._graph.copy(as_view=True)
