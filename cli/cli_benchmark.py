import logging
from itertools import permutations
from pathlib import Path
from typing import Optional

import pandas as pd

from classes_de_elementos.erros import RouteError
from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from constantes.constantes import MODE_ASTAR, MODE_DIJKSTRA
from funcoes_utilitarias.decode_weight import decode_weight
from funcoes_utilitarias.timed_search import timed_search

logger = logging.getLogger(__name__)

BENCHMARK_COLUMNS = ["start", "goal", "mode", "distance", "expanded", "micros", "path", "error"]


def benchmark_pairs(graph: RoadGraph, table: HeuristicTable,
                    pairs: Optional[list[tuple[str, str]]] = None) -> pd.DataFrame:
    '''
    Executa A* e Dijkstra para cada par e devolve uma linha por (par, modo).

    Parâmetros
    ----------
    graph : RoadGraph
    table : HeuristicTable
    pairs : lista de (origem, destino); padrão: todos os pares ordenados de nós distintos

    Retorno
    -------
    pd.DataFrame : colunas BENCHMARK_COLUMNS; 'distance' decodificada (NaN em erro),
                   'error' com a mensagem (None em sucesso)
    '''
    if pairs is None:
        pairs = list(permutations(graph.nodes(), 2))

    rows: list[dict] = []
    for start, goal in pairs:
        for mode, heuristic in ((MODE_ASTAR, table), (MODE_DIJKSTRA, None)):
            row = {"start": start, "goal": goal, "mode": mode, "distance": None,
                   "expanded": None, "micros": None, "path": None, "error": None}
            try:
                result, elapsed_micros = timed_search(graph, heuristic, start, goal)
            except RouteError as exc:
                row["error"] = f"{type(exc).__name__}: {exc}"
            else:
                row.update(distance=decode_weight(result.distance), expanded=result.expanded,
                           micros=elapsed_micros, path=" > ".join(result.path))
            rows.append(row)

    results_df = pd.DataFrame(rows, columns=BENCHMARK_COLUMNS)
    for column in ("distance", "expanded", "micros"):
        results_df[column] = pd.to_numeric(results_df[column], errors="coerce")
    return results_df


def _count_successes(errors: pd.Series) -> int:
    return int(errors.isna().sum())


def _count_failures(errors: pd.Series) -> int:
    return int(errors.notna().sum())


def summarize_benchmark(results_df: pd.DataFrame) -> pd.DataFrame:
    '''
    Resumo por modo: média de nós expandidos, média de microssegundos, sucessos e falhas.
    '''
    return results_df.groupby("mode", sort=False).agg(
        expanded_mean=("expanded", "mean"),
        micros_mean=("micros", "mean"),
        successes=("error", _count_successes),
        failures=("error", _count_failures),
    )


def distance_mismatches(results_df: pd.DataFrame) -> pd.DataFrame:
    '''
    Pares em que A* e Dijkstra encontraram distâncias diferentes (heurística não admissível).
    '''
    solved = results_df[results_df["error"].isna()]
    if solved.empty:
        return pd.DataFrame(columns=["start", "goal", MODE_ASTAR, MODE_DIJKSTRA])
    by_mode = solved.pivot_table(index=["start", "goal"], columns="mode",
                                 values="distance", aggfunc="first")
    if MODE_ASTAR not in by_mode.columns or MODE_DIJKSTRA not in by_mode.columns:
        return pd.DataFrame(columns=["start", "goal", MODE_ASTAR, MODE_DIJKSTRA])
    both = by_mode.dropna(subset=[MODE_ASTAR, MODE_DIJKSTRA])
    differing = both[both[MODE_ASTAR] != both[MODE_DIJKSTRA]]
    return differing.reset_index()[["start", "goal", MODE_ASTAR, MODE_DIJKSTRA]]


def cli_benchmark(graph: RoadGraph, table: HeuristicTable,
                  pairs: Optional[list[tuple[str, str]]] = None, out_csv: Optional[str] = None) -> int:
    '''
    Comando "benchmark": compara os dois modos em vários pares, grava o CSV
    (se pedido) e imprime o resumo por modo.

    Retorno
    -------
    int : 0; 1 se algum par tiver distâncias diferentes entre A* e Dijkstra
    '''
    results_df = benchmark_pairs(graph, table, pairs)

    if out_csv:
        output_path = Path(out_csv)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        results_df.to_csv(output_path, index=False)
        logger.info("Benchmark com %d linhas gravado em %s", len(results_df), output_path)

    print(f"Pares avaliados: {len(results_df) // 2}")
    print(summarize_benchmark(results_df).to_string(float_format=lambda value: f"{value:.1f}"))

    mismatches = distance_mismatches(results_df)
    if not mismatches.empty:
        logger.warning("A* e Dijkstra divergem em %d par(es)", len(mismatches))
        print("Distâncias divergentes:")
        print(mismatches.to_string(index=False))
        return 1
    return 0
