from dataclasses import dataclass

@dataclass(frozen=True)
class SearchResult:
    '''
    Resultado de uma busca bem-sucedida.
    - path: nós na ordem origem→destino (path[0] é a origem, path[-1] o destino)
    - distance: soma dos pesos do caminho, em décimos
    - expanded: quantidade de nós retirados da fronteira e processados
    - mode: "A*" ou "Dijkstra"
    '''
    path: tuple[str, ...] = ()
    distance: int = 0
    expanded: int = 0
    mode: str = ""

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def goal(self) -> str:
        return self.path[-1]
