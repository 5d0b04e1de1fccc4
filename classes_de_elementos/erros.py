'''
Exceções do comparador de rotas.

Todas derivam de RouteError, para que o laço interativo possa capturar
qualquer falha de busca com um único except e seguir para a próxima consulta.
'''


class RouteError(Exception):
    '''Base de todos os erros de carga e de busca.'''


class InvalidWeight(RouteError, ValueError):
    '''Distância negativa, não finita ou não numérica.'''


class MalformedLine(RouteError, ValueError):
    '''
    Linha de arquivo de entrada fora do formato esperado.

    Atributos
    ---------
    path    : str | None (arquivo de origem, se conhecido)
    line_no : int        (número da linha, 1-based)
    line    : str        (texto original da linha)
    '''

    def __init__(self, reason: str, line_no: int, line: str, path: str | None = None) -> None:
        self.reason = reason
        self.line_no = line_no
        self.line = line
        self.path = path
        where = f"{path}:{line_no}" if path else f"linha {line_no}"
        super().__init__(f"{where}: {reason} | {line!r}")


class InvalidHeuristic(RouteError, ValueError):
    '''Entrada da tabela heurística que viola h(g, g) = 0.'''


class UnknownNode(RouteError, LookupError):
    '''Origem ou destino ausente do grafo.'''

    def __init__(self, labels: list[str]) -> None:
        self.labels = list(labels)
        super().__init__(
            "Não é possível rotear: local(is) inexistente(s): " + ", ".join(self.labels)
        )


class MissingHeuristic(RouteError, LookupError):
    '''A* pediu h(nó, destino) e a tabela não tem a entrada.'''

    def __init__(self, node: str, goal: str) -> None:
        self.node = node
        self.goal = goal
        super().__init__(f"Heurística ausente para ({node}, {goal})")


class Unreachable(RouteError):
    '''A fronteira esvaziou sem alcançar o destino.'''

    def __init__(self, start: str, goal: str, expanded: int) -> None:
        self.start = start
        self.goal = goal
        self.expanded = expanded
        super().__init__(f"Rota de {start} até {goal} não pôde ser completada!")


class SearchInvariantError(RouteError, RuntimeError):
    '''Mapa de predecessores inconsistente (indica defeito na relaxação).'''
