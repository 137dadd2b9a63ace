"""Conversion between OpenAI embedding payloads and Gemini batches."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from .exceptions import UnsupportedFormatError, UnsupportedInputTypeError
from .schemas import EmbedRequest, EmbedResponse, EmbedResponseData, Usage

__all__ = [
    "EmbeddingBatch",
    "EmbeddingInput",
    "Many",
    "Single",
    "convert_request",
    "convert_response",
    "parse_input",
]

_FLOAT_FORMAT = "float"


@dataclass(frozen=True, slots=True)
class Single:
    """A single text input."""

    text: str


@dataclass(frozen=True, slots=True)
class Many:
    """An ordered list of text inputs."""

    texts: tuple[str, ...]


EmbeddingInput: TypeAlias = Single | Many


@dataclass(slots=True)
class EmbeddingBatch:
    """Ordered group of texts submitted to one embedding model in one call."""

    model: str
    texts: list[str] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        """Append a text item to the end of the batch."""
        self.texts.append(text)

    def __len__(self) -> int:
        return len(self.texts)


def parse_input(raw: object) -> EmbeddingInput:
    """Classify the raw ``input`` field of an embedding request.

    Args:
        raw: The decoded JSON value of ``input``.

    Returns:
        ``Single`` for a string, ``Many`` for a list of strings.

    Raises:
        UnsupportedInputTypeError: For any other shape, or a list holding a
            non-string element.
    """
    match raw:
        case str():
            return Single(raw)
        case list():
            for item in raw:
                if not isinstance(item, str):
                    raise UnsupportedInputTypeError(type(item).__name__)
            return Many(tuple(raw))
        case _:
            raise UnsupportedInputTypeError(type(raw).__name__)


def convert_request(request: EmbedRequest, model: str) -> EmbeddingBatch:
    """Convert an OpenAI embedding request into a Gemini batch.

    Args:
        request: The inbound OpenAI-shaped request.
        model: Name of the Gemini embedding model the batch targets.

    Returns:
        EmbeddingBatch: One text item per input, in input order.

    Raises:
        UnsupportedFormatError: If an encoding format other than float is asked for.
        UnsupportedInputTypeError: If ``input`` is not a string or list of strings.
    """
    if request.encoding_format and request.encoding_format != _FLOAT_FORMAT:
        raise UnsupportedFormatError(request.encoding_format)

    batch = EmbeddingBatch(model=model)
    match parse_input(request.input):
        case Single(text):
            batch.add_text(text)
        case Many(texts):
            for text in texts:
                batch.add_text(text)
    return batch


def convert_response(vectors: Sequence[Sequence[float]], model: str) -> EmbedResponse:
    """Convert a Gemini batch result into an OpenAI embeddings response.

    Args:
        vectors: Embedding values in submission order.
        model: Model name echoed from the original request.

    Returns:
        EmbedResponse: One entry per vector with ``index`` matching its position.
    """
    return EmbedResponse(
        data=[
            EmbedResponseData(embedding=list(values), index=index)
            for index, values in enumerate(vectors)
        ],
        model=model,
        usage=Usage(prompt_tokens=0, total_tokens=0),
    )
