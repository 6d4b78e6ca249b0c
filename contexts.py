"""
Rendering contexts for the page templates.

Each builder returns the exact ``params`` dict a template expects; the
field names below are the contract with ``templates/``.
"""
import logging  # Log dei fallimenti di generazione
import random  # Sorgente uniforme di default
from typing import Callable, Optional  # Tipi

from colors import ColorStore, normalize_color_name  # Tabella colori e normalizzazione
from generation import GenerationSuccess  # Risultato della generazione

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
COLOR_TEMPLATE = "hello-node.html"

# template -> (campi obbligatori, campi opzionali, coppia successo/errore)
TEMPLATE_FIELDS = {
    INDEX_TEMPLATE: ({"seo"}, {"kaomoji", "word", "error"}, ("kaomoji", "word")),
    COLOR_TEMPLATE: ({"seo"}, {"color", "colorError"}, ("color", "colorError")),
}

FALSE_FLAGS = ("", "0", "false", "no", "off")


class ContextSchemaError(Exception):
    """A rendering context does not match its template's fields."""


def check_params(template: str, params: dict) -> dict:
    """Assert that ``params`` carries exactly the fields ``template`` uses."""
    if template not in TEMPLATE_FIELDS:
        raise ContextSchemaError(f"Unknown template: {template}")
    required, optional, (ok_field, err_field) = TEMPLATE_FIELDS[template]
    missing = required - params.keys()
    if missing:
        raise ContextSchemaError(f"{template}: missing fields {sorted(missing)}")
    unknown = params.keys() - required - optional
    if unknown:
        raise ContextSchemaError(f"{template}: unexpected fields {sorted(unknown)}")
    if params.get(ok_field) is not None and params.get(err_field) is not None:
        raise ContextSchemaError(f"{template}: both {ok_field} and {err_field} are set")
    return params


def base_params(seo: dict) -> dict:
    # Contesto minimo: solo i metadati del sito
    return {"seo": seo}


def parse_flag(value: Optional[str]) -> bool:
    # Flag da querystring: assente o "false"/"0"/... => False
    if value is None:
        return False
    return value.strip().lower() not in FALSE_FLAGS


def build_index_params(seo: dict, word: Optional[str], generator) -> dict:
    """Context for ``POST /``: ask the generator for a kaomoji for ``word``.

    An empty word makes no external call and yields the base context. A
    failed generation is logged and rendered with ``error: True``.
    """
    if not word:
        return base_params(seo)

    result = generator.generate(word)
    if isinstance(result, GenerationSuccess):
        return {"kaomoji": result.text, "word": None, "error": False, "seo": seo}

    logger.error("Kaomoji generation failed for %r: %s", word, result.reason)
    return {"kaomoji": None, "word": word, "error": True, "seo": seo}


def build_color_params(seo: dict, color: Optional[str], store: ColorStore) -> dict:
    """Context for ``POST /hello-node``: look up a color by name."""
    if not color:
        return base_params(seo)

    entry = store.get(normalize_color_name(color))
    if entry is not None:
        return {"color": entry, "colorError": None, "seo": seo}
    # Nessun colore trovato: si restituisce l'input originale come errore
    return {"color": None, "colorError": color, "seo": seo}


def build_random_color_params(
    seo: dict,
    randomize: bool,
    store: ColorStore,
    rng: Callable[[], float] = random.random,
) -> dict:
    # GET /hello-node?randomize=...: colore casuale dalla tabella
    if not randomize:
        return base_params(seo)
    return {"color": store.random_entry(rng), "colorError": None, "seo": seo}
