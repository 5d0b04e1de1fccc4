from classes_de_elementos.erros import MalformedLine

def parse_pairs_file(file_path: str) -> list[tuple[str, str]]:
    '''
    Lê um arquivo de pares para o benchmark, um par por linha, no formato:
    <origem> <destino>

    Parâmetros
    ----------
    file_path : str (caminho do arquivo)

    Retorno
    -------
    list[tuple[str, str]] : (origem, destino) na ordem do arquivo

    Observações
    -----------
    - Campos separados por espaços em branco; exatamente 2 por linha.
    - Linhas vazias e iniciadas por '#' são ignoradas.
    '''

    with open(file_path, "r", encoding="utf-8") as f:
        raw_lines = [ln.rstrip("\n") for ln in f]

    pairs: list[tuple[str, str]] = []
    for idx, raw in enumerate(raw_lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) != 2:
            raise MalformedLine(f"esperados 2 campos, recebidos {len(parts)}", idx, raw, file_path)
        pairs.append((parts[0], parts[1]))

    return pairs
