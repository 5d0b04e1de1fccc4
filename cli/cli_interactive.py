from typing import Callable, Optional

from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from cli.cli_compare import run_comparison
from constantes.constantes import QUIT_SENTINEL
from funcoes_utilitarias._clear_screen import _clear_screen
from funcoes_utilitarias.print_locations import print_locations

PROMPT = "  >> "


def _read(input_fn: Callable[[str], str], prompt: str) -> Optional[str]:
    '''Lê uma linha; None em fim de entrada (Ctrl-D) ou no sentinela de saída.'''
    try:
        answer = input_fn(prompt)
    except EOFError:
        return None
    answer = answer.strip()
    if answer.lower() == QUIT_SENTINEL:
        return None
    return answer


def cli_interactive(graph: RoadGraph, table: HeuristicTable,
                    input_fn: Callable[[str], str] = input,
                    out=print,
                    clear: Callable[[], None] = _clear_screen) -> int:
    '''
    Laço interativo: lista os locais, pede origem e destino, compara A* e
    Dijkstra e espera ENTER, até o usuário digitar "quit".

    Parâmetros
    ----------
    graph    : RoadGraph
    table    : HeuristicTable
    input_fn : leitura de linha (padrão: input)
    out      : função de saída (padrão: print)
    clear    : limpeza de tela (padrão: _clear_screen)

    Retorno
    -------
    int : 0 (saída normal)
    '''

    while True:
        clear()
        print_locations(graph.nodes(), out=out)

        out("--\nDe qual cidade você está partindo?")
        out(f'Digite "{QUIT_SENTINEL.capitalize()}" a qualquer momento para sair.')
        origin = _read(input_fn, PROMPT)
        if origin is None:
            break

        out("Para qual cidade você vai?")
        destination = _read(input_fn, PROMPT)
        if destination is None:
            break

        clear()
        run_comparison(graph, table, origin, destination, out=out)
        out("")

        try:
            input_fn("Pressione ENTER para continuar...")
        except EOFError:
            break

    return 0
