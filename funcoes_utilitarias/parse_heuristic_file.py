from classes_de_elementos.erros import InvalidWeight, MalformedLine
from funcoes_utilitarias.encode_weight import encode_weight

def parse_heuristic_file(file_path: str) -> list[tuple[str, str, int]]:
    '''
    Lê um arquivo texto de heurística, uma entrada por linha, no formato:
    <origem> <destino> <distância>

    Parâmetros
    ----------
    file_path : str (caminho do arquivo)

    Retorno
    -------
    list[tuple[str, str, int]] : (nó, destino, estimativa em décimos)

    Observações
    -----------
    - Campos separados por espaços em branco; exatamente 3 por linha.
    - O par é ordenado: (A, B) e (B, A) são entradas distintas.
    - Linhas vazias e iniciadas por '#' são ignoradas.
    '''

    with open(file_path, "r", encoding="utf-8") as f:
        raw_lines = [ln.rstrip("\n") for ln in f]

    entries: list[tuple[str, str, int]] = []
    for idx, raw in enumerate(raw_lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) != 3:
            raise MalformedLine(f"esperados 3 campos, recebidos {len(parts)}", idx, raw, file_path)
        node, goal, distance_text = parts

        try:
            distance = float(distance_text)
        except ValueError as exc:
            raise MalformedLine(f"distância não numérica {distance_text!r}", idx, raw, file_path) from exc
        try:
            estimate = encode_weight(distance)
        except InvalidWeight as exc:
            raise InvalidWeight(f"{file_path}:{idx}: {exc}") from exc

        entries.append((node, goal, estimate))

    return entries
