import heapq
import itertools
from typing import Dict, List, Optional, Tuple


class Frontier:
    '''
    Fila de prioridade mínima de nós com semântica de decrease-key.

    Observações
    -----------
    - Implementada sobre heapq com remoção preguiçosa: melhorar a prioridade
      empilha uma nova entrada e a antiga é descartada quando sai do heap.
    - Empates são resolvidos pela ordem de empilhamento (FIFO), então duas
      execuções com a mesma entrada produzem a mesma sequência de pops.
    - Um nó retirado por pop_min sai da fronteira e pode ser reinserido.
    '''
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, str]] = []
        self._best: Dict[str, int] = {}
        self._sequence = itertools.count()

    def push_or_improve(self, node: str, priority: int) -> bool:
        '''
        Insere 'node' com 'priority' se ausente; se presente, só reduz a prioridade.

        Retorno
        -------
        bool : True se a fronteira mudou
        '''
        current = self._best.get(node)
        if current is not None and priority >= current:
            return False
        self._best[node] = priority
        heapq.heappush(self._heap, (priority, next(self._sequence), node))
        return True

    def pop_min(self) -> Optional[Tuple[str, int]]:
        '''
        Remove e retorna (nó, prioridade) de menor prioridade, ou None se vazia.
        '''
        while self._heap:
            priority, _, node = heapq.heappop(self._heap)
            if self._best.get(node) != priority:
                continue  # entrada obsoleta
            del self._best[node]
            return node, priority
        return None

    def __bool__(self) -> bool:
        return bool(self._best)
