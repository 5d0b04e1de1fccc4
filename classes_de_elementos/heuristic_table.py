import logging
from typing import Dict, Iterable, Tuple

from classes_de_elementos.erros import InvalidHeuristic, InvalidWeight, MissingHeuristic
from funcoes_utilitarias.parse_heuristic_file import parse_heuristic_file

logger = logging.getLogger(__name__)


class HeuristicTable:
    '''
    Tabela ordenada (nó, destino) -> estimativa em décimos, usada como h(n) no A*.

    Observações
    -----------
    - Assume-se admissível e consistente; a verificação fica em
      algoritmo_de_busca.heuristic_validation e nunca corrige valores.
    - Entrada ausente levanta MissingHeuristic (não vira 0).
    - Uma tabela criada com zero() responde 0 para qualquer par (h ≡ 0).
    '''
    def __init__(self, estimates: Dict[Tuple[str, str], int] | None = None,
                 default: int | None = None) -> None:
        self._estimates: Dict[Tuple[str, str], int] = {}
        self._default = default
        for (node, goal), estimate in (estimates or {}).items():
            self._set(node, goal, estimate)

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[str, str, int]]) -> "HeuristicTable":
        '''
        Constrói a tabela a partir de triplas (nó, destino, estimativa_em_décimos).

        Observações
        -----------
        Entradas repetidas: vale a última.
        '''
        table = cls()
        for node, goal, estimate in entries:
            table._set(node, goal, estimate)
        return table

    @classmethod
    def load_table(cls, heuristic_path: str) -> "HeuristicTable":
        '''
        Lê o arquivo "<nó> <destino> <distância>" e constrói a tabela.
        '''
        table = cls.from_entries(parse_heuristic_file(heuristic_path))
        logger.info("Heurística carregada de %s: %d entradas", heuristic_path, len(table))
        return table

    @classmethod
    def zero(cls) -> "HeuristicTable":
        return cls(default=0)

    def _set(self, node: str, goal: str, estimate: int) -> None:
        if isinstance(estimate, bool) or not isinstance(estimate, int) or estimate < 0:
            raise InvalidWeight(f"Estimativa inválida para ({node}, {goal}): {estimate!r}")
        if node == goal and estimate != 0:
            raise InvalidHeuristic(f"h({node}, {goal}) deve ser 0, recebido {estimate}")
        self._estimates[(node, goal)] = estimate

    def h(self, node: str, goal: str) -> int:
        '''
        Estimativa (em décimos) da distância restante de 'node' até 'goal'.

        Parâmetros
        ----------
        node : str
        goal : str

        Retorno
        -------
        int : 0 quando node == goal; caso contrário o valor da tabela
        '''
        if node == goal:
            return 0
        try:
            return self._estimates[(node, goal)]
        except KeyError:
            if self._default is not None:
                return self._default
            raise MissingHeuristic(node, goal) from None

    def goals(self) -> list[str]:
        '''
        Destinos que aparecem na tabela, na ordem da primeira ocorrência.
        '''
        return list(dict.fromkeys(goal for _, goal in self._estimates))

    def __len__(self) -> int:
        return len(self._estimates)
