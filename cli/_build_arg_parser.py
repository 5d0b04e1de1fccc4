import argparse

from constantes.constantes import DEFAULT_HEURISTIC_PATH, DEFAULT_ROUTES_PATH

# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotas",
        description=(
            "Compara A* e Dijkstra no cálculo da rota mais curta entre dois locais.\n"
            " - rotas : linhas '(origem, destino, distância)'\n"
            " - heurística : linhas '<nó> <destino> <distância>'\n"
            "Sem comando, inicia o modo interativo."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--routes", dest="routes_path", default=DEFAULT_ROUTES_PATH,
                        help=f"Arquivo de rotas (padrão: {DEFAULT_ROUTES_PATH})")
    parser.add_argument("--heuristic", dest="heuristic_path", default=DEFAULT_HEURISTIC_PATH,
                        help=f"Arquivo de heurística (padrão: {DEFAULT_HEURISTIC_PATH})")
    parser.add_argument("--log-level", dest="log_level", default="WARNING",
                        help="Nível de log (ex.: WARNING, INFO, DEBUG)")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("interactive", help="Laço interativo (padrão)")
    subparsers.add_parser("stats", help="Imprime |V|, |E| e o tamanho da tabela heurística")

    compare = subparsers.add_parser("compare", help="Compara A* e Dijkstra para uma consulta")
    compare.add_argument("origin", help="Local de partida")
    compare.add_argument("destination", help="Local de chegada")

    benchmark = subparsers.add_parser("benchmark", help="Compara A* e Dijkstra em vários pares")
    benchmark.add_argument("--pairs", dest="pairs_path", default=None,
                           help="Arquivo com linhas '<origem> <destino>' (padrão: todos os pares)")
    benchmark.add_argument("--out", dest="out_csv", default=None,
                           help="CSV de saída com uma linha por (par, modo)")

    subparsers.add_parser("validate", help="Verifica consistência e admissibilidade da heurística")
    return parser
