import random  # Sorgente uniforme per il colore casuale
from dataclasses import dataclass  # Dataclass per i modelli dati
from types import MappingProxyType  # Vista in sola lettura sul dizionario
from typing import Callable, Dict, List, Optional  # Tipi

from config import ConfigError, read_json  # Errori di avvio e lettura JSON


# ---------- Domain classes ----------
@dataclass(frozen=True)
class ColorEntry:
    name: str  # Nome visualizzato (es. SkyBlue)
    hex: str  # Valore esadecimale (es. #87CEEB)
    rgb: str  # Valore rgb() per il CSS


def normalize_color_name(value: str) -> str:
    # Rimuove tutti gli spazi e porta in minuscolo: "  Sky Blue " -> "skyblue"
    return "".join(value.split()).lower()


class ColorStore:
    """Read-only lookup table of colors keyed by normalized name."""

    def __init__(self, entries: Dict[str, ColorEntry]):
        self._entries = MappingProxyType(dict(entries))  # Copia congelata, nessuna API di modifica

    def get(self, key: str) -> Optional[ColorEntry]:
        return self._entries.get(key)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        return list(self._entries)

    def random_entry(self, rng: Callable[[], float] = random.random) -> ColorEntry:
        """Pick one entry uniformly; ``rng`` returns floats in [0, 1)."""
        keys = self.keys()
        if not keys:
            raise LookupError("color store is empty")
        index = min(int(len(keys) * rng()), len(keys) - 1)  # Clamp nel caso rng() restituisca 1.0
        return self._entries[keys[index]]


def load_colors(path) -> ColorStore:
    # Carica il file colori una sola volta all'avvio; errori => avvio fallito
    data = read_json(path)
    entries = {}
    for key, attrs in data.items():
        try:
            entry = ColorEntry(name=attrs["name"], hex=attrs["hex"], rgb=attrs["rgb"])
        except (KeyError, TypeError):
            raise ConfigError(f"Malformed color entry {key!r} in {path}")
        entries[normalize_color_name(key)] = entry
    if not entries:
        raise ConfigError(f"No colors defined in {path}")
    return ColorStore(entries)
