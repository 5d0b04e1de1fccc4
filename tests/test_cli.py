from __future__ import annotations

import textwrap
from pathlib import Path

import pandas as pd
import pytest

from classes_de_elementos.heuristic_table import HeuristicTable
from classes_de_elementos.road_graph import RoadGraph
from cli.cli_benchmark import benchmark_pairs, distance_mismatches, summarize_benchmark
from cli.cli_compare import run_comparison
from cli.cli_interactive import cli_interactive
from funcoes_utilitarias.print_locations import print_locations
from rotas import main

ROOT = Path(__file__).resolve().parent.parent
SAMPLE_ARGS = ["--routes", str(ROOT / "routes.txt"), "--heuristic", str(ROOT / "euclidian.txt")]


def _write_inputs(tmp_path, routes: str, heuristic: str) -> list[str]:
    routes_path = tmp_path / "routes.txt"
    heuristic_path = tmp_path / "euclidian.txt"
    routes_path.write_text(textwrap.dedent(routes).lstrip("\n"), encoding="utf-8")
    heuristic_path.write_text(textwrap.dedent(heuristic).lstrip("\n"), encoding="utf-8")
    return ["--routes", str(routes_path), "--heuristic", str(heuristic_path)]


def _scripted(*answers: str):
    remaining = list(answers)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input, prompts


def _sample() -> tuple[RoadGraph, HeuristicTable]:
    return (RoadGraph.load_graph(str(ROOT / "routes.txt")),
            HeuristicTable.load_table(str(ROOT / "euclidian.txt")))


def test_compare_prints_route_expansions_and_timings(tmp_path, capsys):
    args = _write_inputs(
        tmp_path,
        """
        (S, X, 2.0)
        (X, G, 2.0)
        (S, Y, 1.0)
        (Y, G, 5.0)
        """,
        """
        S G 4.0
        X G 2.0
        Y G 2.0
        G G 0
        """,
    )

    assert main(args + ["compare", "S", "G"]) == 0

    out = capsys.readouterr().out
    assert "Executando A*..." in out
    assert "Executando Dijkstra..." in out
    assert "4 nós considerados" in out
    assert "Siga de S para X: 2.0 mi." in out
    assert "Siga de X para G: 2.0 mi." in out
    assert "Distância total (A*): 4.0 mi." in out
    assert "Distância total (Dijkstra): 4.0 mi." in out
    assert "Tempo de cálculo do A*:" in out
    assert "Tempo de cálculo do Dijkstra:" in out


def test_compare_unknown_location_is_a_single_line(capsys):
    assert main(SAMPLE_ARGS + ["compare", "Arad", "Atlantis"]) == 1

    out = capsys.readouterr().out
    assert out.count("inexistente") == 1
    assert "Atlantis" in out
    assert "Executando" not in out


def test_compare_unreachable_reported_for_both_modes(tmp_path, capsys):
    args = _write_inputs(tmp_path, "(A, B, 1.0)\n(C, D, 1.0)\n", "A D 0.5\nB D 0.5\n")

    assert main(args + ["compare", "A", "D"]) == 1

    out = capsys.readouterr().out
    assert out.count("não pôde ser completada") == 2
    assert "Tempo de cálculo" not in out


def test_missing_heuristic_only_fails_astar(tmp_path, capsys):
    args = _write_inputs(tmp_path, "(A, B, 1.0)\n(B, C, 1.0)\n", "A C 2.0\n")

    assert main(args + ["compare", "A", "C"]) == 1

    out = capsys.readouterr().out
    assert "Heurística ausente para (B, C)" in out
    assert "Distância total (Dijkstra): 2.0 mi." in out
    assert "Tempo de cálculo do Dijkstra:" in out
    assert "Tempo de cálculo do A*:" not in out


def test_missing_input_file_exits_with_1(tmp_path):
    assert main(["--routes", str(tmp_path / "nope.txt"), "--heuristic", str(tmp_path / "nope2.txt"),
                 "stats"]) == 1


def test_malformed_input_exits_with_2(tmp_path):
    args = _write_inputs(tmp_path, "(A, B)\n", "A B 1.0\n")
    assert main(args + ["stats"]) == 2


def test_invalid_goal_heuristic_exits_with_2(tmp_path):
    args = _write_inputs(tmp_path, "(A, B, 1.0)\n", "B B 1.0\n")
    assert main(args + ["stats"]) == 2


def test_stats(capsys):
    assert main(SAMPLE_ARGS + ["stats"]) == 0

    out = capsys.readouterr().out
    assert "|V|=7 |E|=8" in out
    assert "entradas=42" in out


def test_validate_sample_and_inconsistent(tmp_path, capsys):
    assert main(SAMPLE_ARGS + ["validate"]) == 0
    assert "consistente e admissível" in capsys.readouterr().out

    args = _write_inputs(
        tmp_path,
        "(S, A, 4.0)\n(S, B, 1.0)\n(B, A, 1.0)\n(A, G, 10.0)\n",
        "S G 0\nA G 0\nB G 11.0\n",
    )
    assert main(args + ["validate"]) == 1
    assert "2 violação(ões)" in capsys.readouterr().out


def test_benchmark_writes_csv(tmp_path, capsys):
    out_csv = tmp_path / "relatorios" / "benchmark.csv"

    assert main(SAMPLE_ARGS + ["benchmark", "--out", str(out_csv)]) == 0

    results_df = pd.read_csv(out_csv)
    assert len(results_df) == 7 * 6 * 2
    assert set(results_df["mode"]) == {"A*", "Dijkstra"}
    assert results_df["error"].isna().all()
    assert "Pares avaliados: 42" in capsys.readouterr().out


def test_benchmark_flags_inadmissible_heuristic(tmp_path, capsys):
    args = _write_inputs(
        tmp_path,
        "(S, X, 2.0)\n(X, G, 2.0)\n(S, Y, 1.0)\n(Y, G, 5.0)\n",
        "S G 0\nX G 9.0\nY G 0\n",
    )
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("# origem destino\nS G\n", encoding="utf-8")

    assert main(args + ["benchmark", "--pairs", str(pairs)]) == 1

    out = capsys.readouterr().out
    assert "Distâncias divergentes:" in out


@pytest.mark.parametrize("pairs_text", ["Arad\n", "Arad Sibiu Pitesti\n"])
def test_benchmark_malformed_pairs_exit_with_2(tmp_path, capsys, pairs_text):
    pairs = tmp_path / "pairs.txt"
    pairs.write_text(pairs_text, encoding="utf-8")

    assert main(SAMPLE_ARGS + ["benchmark", "--pairs", str(pairs)]) == 2
    assert "Pares avaliados" not in capsys.readouterr().out


def test_benchmark_missing_pairs_file_exits_with_1(tmp_path):
    assert main(SAMPLE_ARGS + ["benchmark", "--pairs", str(tmp_path / "nope.txt")]) == 1


def test_benchmark_helpers_on_sample():
    graph, table = _sample()

    results_df = benchmark_pairs(graph, table, [("Arad", "Bucharest"), ("Arad", "Atlantis")])
    summary = summarize_benchmark(results_df)

    assert len(results_df) == 4
    solved = results_df[results_df["error"].isna()]
    assert list(solved["distance"]) == pytest.approx([41.8, 41.8])
    assert summary.loc["A*", "failures"] == 1
    assert summary.loc["Dijkstra", "successes"] == 1
    assert distance_mismatches(results_df).empty


def test_interactive_session_runs_query_then_quits():
    graph, table = _sample()
    fake_input, prompts = _scripted("Arad", "Bucharest", "", "quit")
    lines: list[str] = []
    clears: list[int] = []

    status = cli_interactive(graph, table, input_fn=fake_input, out=lines.append,
                             clear=lambda: clears.append(1))

    assert status == 0
    text = "\n".join(lines)
    assert "Seus locais:" in text
    assert "Siga de Arad para Sibiu: 14.0 mi." in text
    assert "Siga de Pitesti para Bucharest: 10.1 mi." in text
    assert "Distância total (A*): 41.8 mi." in text
    assert text.count("De qual cidade você está partindo?") == 2
    assert prompts[2] == "Pressione ENTER para continuar..."
    assert len(clears) == 3


@pytest.mark.parametrize("answers", [("QUIT",), ("Arad", "Quit"), ()])
def test_interactive_quit_sentinel_and_eof(answers):
    graph, table = _sample()
    fake_input, _ = _scripted(*answers)
    lines: list[str] = []

    assert cli_interactive(graph, table, input_fn=fake_input, out=lines.append,
                           clear=lambda: None) == 0
    assert not any("Executando" in line for line in lines)


def test_interactive_unknown_location_continues_loop():
    graph, table = _sample()
    fake_input, _ = _scripted("Nowhere", "Arad", "", "Sibiu", "Arad", "", "quit")
    lines: list[str] = []

    cli_interactive(graph, table, input_fn=fake_input, out=lines.append, clear=lambda: None)

    text = "\n".join(lines)
    assert text.count("inexistente") == 1
    assert "Siga de Sibiu para Arad: 14.0 mi." in text


def test_run_comparison_returns_true_on_success():
    graph, table = _sample()
    lines: list[str] = []
    assert run_comparison(graph, table, "Craiova", "Fagaras", out=lines.append) is True


def test_print_locations_rows_of_five():
    lines: list[str] = []
    print_locations(["Arad", "Sibiu", "Fagaras", "Rimnicu", "Pitesti", "Bucharest", "Craiova"],
                    out=lines.append)

    assert lines[0] == "Seus locais:\n"
    assert lines[1].startswith("Arad" + " " * 11 + "Sibiu")
    assert lines[1].split() == ["Arad", "Sibiu", "Fagaras", "Rimnicu", "Pitesti"]
    assert lines[2].split() == ["Bucharest", "Craiova"]
