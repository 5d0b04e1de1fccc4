# Constantes: codificação de distâncias em ponto fixo
FIXED_POINT_SCALE = 10  # décimos: 1.5 -> 15
DISTANCE_UNIT = "mi"


# Arquivos de entrada lidos do diretório corrente quando não informados
DEFAULT_ROUTES_PATH = "routes.txt"
DEFAULT_HEURISTIC_PATH = "euclidian.txt"


# Laço interativo
QUIT_SENTINEL = "quit"
LOCATIONS_PER_ROW = 5
LOCATION_COLUMN_WIDTH = 15


# Rótulos dos modos de busca (usados em relatórios e no CSV do benchmark)
MODE_ASTAR = "A*"
MODE_DIJKSTRA = "Dijkstra"
