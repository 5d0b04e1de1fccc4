from classes_de_elementos.erros import InvalidWeight, MalformedLine
from funcoes_utilitarias.encode_weight import encode_weight

def parse_routes_file(file_path: str) -> list[tuple[str, str, int]]:
    '''
    Lê um arquivo texto de rotas, uma aresta por linha, no formato:
    (origem, destino, distância)

    Parâmetros
    ----------
    file_path : str (caminho do arquivo)

    Retorno
    -------
    list[tuple[str, str, int]] : (origem, destino, peso em décimos) na ordem do arquivo

    Observações
    -----------
    - Parênteses e espaços nas pontas são opcionais; campos são aparados.
    - Linhas vazias e iniciadas por '#' são ignoradas.
    - Linha fora do formato levanta MalformedLine; distância negativa ou não
      finita levanta InvalidWeight (com a linha na mensagem).
    '''

    with open(file_path, "r", encoding="utf-8") as f:
        raw_lines = [ln.rstrip("\n") for ln in f]

    edges: list[tuple[str, str, int]] = []
    for idx, raw in enumerate(raw_lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        fields = [field.strip() for field in line.strip("()").split(",")]
        if len(fields) != 3:
            raise MalformedLine(f"esperados 3 campos, recebidos {len(fields)}", idx, raw, file_path)
        route_from, route_to, distance_text = fields
        if not route_from or not route_to:
            raise MalformedLine("rótulo de local vazio", idx, raw, file_path)

        try:
            distance = float(distance_text)
        except ValueError as exc:
            raise MalformedLine(f"distância não numérica {distance_text!r}", idx, raw, file_path) from exc
        try:
            weight = encode_weight(distance)
        except InvalidWeight as exc:
            raise InvalidWeight(f"{file_path}:{idx}: {exc}") from exc

        edges.append((route_from, route_to, weight))

    return edges
