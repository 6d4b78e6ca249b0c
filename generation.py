"""
Kaomoji generation over the OpenAI completions API.
"""
from dataclasses import dataclass  # Dataclass per il risultato
from typing import Union  # Tipi

import openai  # Client ufficiale OpenAI

KAOMOJI_PROMPT = (
    'You are given a sentence with a maximum of 4 words: "{word}". '
    "Generate a kaomoji without emoji or emoticon to express the sentiment of the sentence "
    "or something related to the action of the verb. Don't use words only the Kaomoji."
)


class GenerationError(Exception):
    """The completion service failed or returned no candidate."""


@dataclass(frozen=True)
class GenerationSuccess:
    text: str  # Testo del primo candidato


@dataclass(frozen=True)
class GenerationFailure:
    reason: str  # Descrizione dell'errore (per il log)


GenerationResult = Union[GenerationSuccess, GenerationFailure]


class KaomojiGenerator:
    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-3.5-turbo-instruct",
        temperature: float = 0.8,
        max_tokens: int = 100,
        timeout: float = 30.0,
        client=None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature  # Temperatura fissa
        self.max_tokens = max_tokens  # Limite fisso di lunghezza dell'output
        self.timeout = timeout
        self._client = client  # Client iniettabile (test); altrimenti creato al primo uso

    @classmethod
    def from_settings(cls, settings) -> "KaomojiGenerator":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
            timeout=settings.OPENAI_TIMEOUT,
        )

    @property
    def client(self):
        if self._client is None:
            # max_retries=0: nessun nuovo tentativo, l'errore torna subito al chiamante
            self._client = openai.OpenAI(
                api_key=self.api_key or None, timeout=self.timeout, max_retries=0
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the first candidate's text.

        Raises GenerationError when the call fails or no candidate comes back.
        """
        try:
            response = self.client.completions.create(
                model=self.model,
                prompt=prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            # Rete, timeout, autenticazione, quota, chiave mancante...
            raise GenerationError(f"{type(e).__name__}: {e}")

        choices = getattr(response, "choices", None)
        if not choices:
            raise GenerationError("No kaomoji generated.")
        text = getattr(choices[0], "text", None)
        if text is None:
            raise GenerationError("Malformed completion: first choice has no text")
        text = text.strip()
        if not text:
            raise GenerationError("No kaomoji generated: empty completion")
        return text

    def generate(self, word: str) -> GenerationResult:
        # Nessuna eccezione verso il chiamante: il risultato e' esplicito
        try:
            return GenerationSuccess(self.complete(KAOMOJI_PROMPT.format(word=word)))
        except GenerationError as e:
            return GenerationFailure(str(e))

