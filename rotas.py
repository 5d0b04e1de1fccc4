#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
Comparador de rotas: A* x Dijkstra
----------------------------------------------------------------------------
Lê um grafo de estradas não dirigido e uma tabela heurística e calcula a
rota mais curta entre dois locais com A* (usando a tabela) e com Dijkstra,
relatando a rota, a distância total, os nós considerados e o tempo de cada
algoritmo.

Entradas
--------
- routes.txt    : "(origem, destino, distância)" por linha
- euclidian.txt : "<nó> <destino> <distância>" por linha

Distâncias em DÉCIMOS
---------------------
- Toda distância é convertida para inteiro em décimos (1.5 -> 15) ao ser
  lida; as buscas só comparam inteiros e a conversão de volta acontece
  apenas na impressão.

Uso
---
  python rotas.py                         (modo interativo)
  python rotas.py compare <origem> <destino>
  python rotas.py stats | benchmark [--out CSV] | validate
============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from classes_de_elementos.erros import RouteError
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from cli._build_arg_parser import _build_arg_parser
from cli.cli_benchmark import cli_benchmark
from cli.cli_compare import cli_compare
from cli.cli_interactive import cli_interactive
from cli.cli_stats import cli_stats
from cli.cli_validate import cli_validate
from funcoes_utilitarias.parse_pairs_file import parse_pairs_file


def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    routes_path = Path(args.routes_path).expanduser()
    heuristic_path = Path(args.heuristic_path).expanduser()
    pairs_arg = getattr(args, "pairs_path", None)
    pairs_path = Path(pairs_arg).expanduser() if pairs_arg else None
    input_paths = [p for p in (routes_path, heuristic_path, pairs_path) if p is not None]
    for input_path in input_paths:
        if not input_path.exists():
            logging.error("Arquivo de entrada não existe: %s", input_path)
            return 1

    try:
        graph = RoadGraph.load_graph(str(routes_path))
        table = HeuristicTable.load_table(str(heuristic_path))
        pairs = parse_pairs_file(str(pairs_path)) if pairs_path else None
    except (RouteError, OSError, UnicodeDecodeError) as exc:
        logging.error("Falha ao carregar entradas: %s", exc)
        return 2

    command = args.command or "interactive"
    if command == "stats":
        return cli_stats(graph, table)
    if command == "compare":
        return cli_compare(graph, table, args.origin, args.destination)
    if command == "benchmark":
        return cli_benchmark(graph, table, pairs=pairs, out_csv=args.out_csv)
    if command == "validate":
        return cli_validate(graph, table)
    return cli_interactive(graph, table)


if __name__ == "__main__":
    raise SystemExit(main())
