"""Shared constants, heuristic rule tables, and user-facing messages.

Centralizes the data-driven pieces used by route generation, example
synthesis, and the request simulator.
"""

DEFAULT_PREFIX = '/api/v1'
STORE_KEY = 'api-documentation'
STORE_ENV_VAR = 'API_MOCKER_STORE'
DEFAULT_STORE_PATH = '.api_mocker/documentation.json'

# ── Example Synthesis Rules ─────────────────────────────────────────────
# Evaluated top to bottom; first rule whose substring appears in the
# lowercased field name wins.

STRING_EXAMPLE_RULES: list[tuple[tuple[str, ...], str]] = [
    (('name', 'nom'), 'Nouveau nom'),
    (('email', 'mail'), 'nouveau@example.com'),
    (('title', 'titre'), 'Nouveau titre'),
    (('description', 'desc'), 'Nouvelle description'),
    (('content', 'contenu'), 'Nouveau contenu'),
    (('author', 'auteur'), 'Nouvel auteur'),
    (('category', 'categorie'), 'Nouvelle catégorie'),
]

NUMBER_EXAMPLE_RULES: list[tuple[tuple[str, ...], float]] = [
    (('price', 'prix'), 29.99),
    (('age',), 25),
    (('quantity', 'quantite'), 10),
    (('score', 'note'), 4.5),
]

NUMBER_SCALE_FACTOR = 1.1
NUMBER_FALLBACK = 100

# ── Route Descriptions ──────────────────────────────────────────────────

ROOT_LABEL = 'toutes les données'
COLLECTION_LABEL = 'la collection'

METHOD_DESCRIPTIONS: dict[str, str] = {
    'GET': 'Méthode : GET (lecture)',
    'POST': 'Méthode : POST (création)',
    'PUT': 'Méthode : PUT (modification)',
    'DELETE': 'Méthode : DELETE (suppression)',
}

# ── Simulator Messages ──────────────────────────────────────────────────

MSG_NOT_INITIALIZED = 'Simulateur non initialisé.'
MSG_RESOURCE_NOT_FOUND = 'Ressource non trouvée'
MSG_BODY_REQUIRED = 'Corps de requête requis'
MSG_NOT_A_COLLECTION = "La cible n'est pas une collection"
MSG_COLLECTION_NOT_FOUND = 'Collection non trouvée'
MSG_ITEM_NOT_FOUND = 'Élément non trouvé'
MSG_METHOD_NOT_SUPPORTED = 'Méthode non supportée'


def describe_method(method: str) -> str:
    """Human-readable label for an HTTP method."""
    upper = method.upper()
    return METHOD_DESCRIPTIONS.get(upper, f'Méthode : {upper}')
