## Turning untrusted model text into typed results
"""
Model output is untrusted: it may be fenced in markdown, truncated, or shaped
differently from what the prompt asked for. decode() gives an explicit
Ok / DecodeError answer; coerce() wraps a provider call and always hands back
a usable value, substituting the fallback when either the call or the decode
fails.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Generic, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from careercoach.agents.llm.base import LLMError

logger = logging.getLogger("careercoach.coercion")

T = TypeVar("T", bound=BaseModel)

_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class DecodeError:
    reason: str
    raw: str


DecodeResult = Union[Ok[T], DecodeError]


@dataclass(frozen=True)
class Coerced(Generic[T]):
    value: T
    used_fallback: bool = False
    error: str | None = None


def strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def decode(schema: Type[T], raw: str) -> DecodeResult:
    text = strip_code_fences(raw)
    if not text:
        return DecodeError("empty response", raw)
    try:
        return Ok(schema.model_validate_json(text))
    except ValidationError as e:
        return DecodeError(f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}", raw)


def coerce(schema: Type[T], produce: Callable[[], str], fallback: T) -> Coerced[T]:
    """Run one provider call and decode it; never raises for provider or decode failures."""
    try:
        raw = produce()
    except LLMError as e:
        logger.warning("%s generation failed, using fallback: %s", schema.__name__, e)
        return Coerced(fallback.model_copy(deep=True), used_fallback=True, error=str(e))

    logger.debug("Raw %s response: %s", schema.__name__, raw)

    result = decode(schema, raw)
    if isinstance(result, DecodeError):
        logger.warning("%s response did not decode, using fallback: %s", schema.__name__, result.reason)
        return Coerced(fallback.model_copy(deep=True), used_fallback=True, error=result.reason)

    return Coerced(result.value)
