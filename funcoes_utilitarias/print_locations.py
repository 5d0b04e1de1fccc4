from constantes.constantes import LOCATION_COLUMN_WIDTH, LOCATIONS_PER_ROW

def print_locations(locations: list[str], out=print) -> None:
    '''
    Imprime os locais disponíveis em linhas de LOCATIONS_PER_ROW colunas
    com LOCATION_COLUMN_WIDTH caracteres cada.

    Parâmetros
    ----------
    locations : list[str] (na ordem de RoadGraph.nodes())
    out       : função de saída (padrão: print)
    '''

    out("Seus locais:\n")
    for start in range(0, len(locations), LOCATIONS_PER_ROW):
        row = locations[start:start + LOCATIONS_PER_ROW]
        out("".join(f"{name:<{LOCATION_COLUMN_WIDTH}}" for name in row).rstrip())
