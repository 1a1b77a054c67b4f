"""
Reaction Resolver

Produces a ReactionResult for a (remedy, condition) pair. The no-remedy case
is answered from a canned table; everything else is one structured-output
request to Gemini. Failures of any kind end in a fixed fallback result, so
resolve() never raises.
"""
from typing import Dict, Any, Optional
import json
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from toothtutor.core.domain import (
    Condition,
    Mood,
    PAIN_MAX,
    PAIN_MIN,
    ReactionResult,
    RemedyType,
    Verdict,
)
from toothtutor.core.llm.gemini_client import GeminiClient, GeminiConfig
from toothtutor.utils import get_logger, GeminiUnavailableError, ReactionDecodeError

logger = get_logger(__name__)


REACTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "painLevel": {
            "type": "integer",
            "description": "Estimated pain level on a scale of 1-10 immediately after application.",
        },
        "sensationDescription": {
            "type": "string",
            "description": "A vivid description of what the tooth 'feels' (e.g., burning, soothing cooling, stinging).",
        },
        "scientificEffect": {
            "type": "string",
            "description": "A concise scientific explanation of the chemical interaction with the exposed nerve or decayed tissue.",
        },
        "verdict": {
            "type": "string",
            "enum": [v.value for v in Verdict],
            "description": "The safety verdict for using this substance on the specific tooth condition.",
        },
        "mood": {
            "type": "string",
            "enum": [m.value for m in Mood],
            "description": "The emotional state of the tooth character.",
        },
    },
    "required": ["painLevel", "sensationDescription", "scientificEffect", "verdict", "mood"],
}

REACTION_TEMPERATURE = 0.4

_CANNED_REACTIONS: Dict[Condition, ReactionResult] = {
    Condition.BROKEN: ReactionResult(
        pain_level=5,
        sensation_description="A sharp, shooting pain with every breath of air.",
        scientific_effect="The exposed pulp is directly vulnerable to air, temperature, and pressure.",
        verdict=Verdict.USE_WITH_CAUTION,
        mood=Mood.NEUTRAL,
    ),
    Condition.CAVITY: ReactionResult(
        pain_level=3,
        sensation_description="A dull, persistent ache deep inside the tooth.",
        scientific_effect="Bacteria in the cavity are irritating the pulp, causing inflammation (pulpitis).",
        verdict=Verdict.USE_WITH_CAUTION,
        mood=Mood.NEUTRAL,
    ),
}

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)


class ReactionPayload(BaseModel):
    """Wire shape of Gemini's answer."""

    model_config = ConfigDict(extra="ignore")

    pain_level: int = Field(alias="painLevel")
    sensation_description: str = Field(alias="sensationDescription")
    scientific_effect: str = Field(alias="scientificEffect")
    verdict: Verdict
    mood: Mood

    @field_validator("pain_level", mode="before")
    @classmethod
    def require_number(cls, v: Any) -> Any:
        # bool is an int subclass; strings would be coerced in lax mode
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("painLevel must be a JSON number")
        return v

    @field_validator("pain_level")
    @classmethod
    def clamp_pain(cls, v: int) -> int:
        return max(PAIN_MIN, min(PAIN_MAX, v))

    def to_result(self) -> ReactionResult:
        return ReactionResult(
            pain_level=self.pain_level,
            sensation_description=self.sensation_description,
            scientific_effect=self.scientific_effect,
            verdict=self.verdict,
            mood=self.mood,
        )


def canned_reaction(condition: Condition) -> ReactionResult:
    """Untreated tooth: how it feels with no remedy applied."""
    return _CANNED_REACTIONS[condition]


def fallback_reaction(remedy: str) -> ReactionResult:
    """Result used whenever Gemini cannot give a usable answer."""
    return ReactionResult(
        pain_level=5,
        sensation_description=f"The tooth is unsure how to react to {remedy}.",
        scientific_effect="Data unavailable for this substance.",
        verdict=Verdict.USE_WITH_CAUTION,
        mood=Mood.NEUTRAL,
        is_fallback=True,
    )


def build_prompt(remedy: str, condition: Condition) -> str:
    return f"""
I have a character that is a "{condition.description}".
A user just applied the substance "{remedy}" directly to the affected area.

Explain the reaction specifically for a {condition.value} tooth.

Key Context:
- A Broken Tooth has raw nerve exposure. Reactions are immediate, violent, and often more painful.
- A Cavity has decayed tissue covering the nerve but is porous. Reactions might be slower, duller, or trapped inside the hole.
- If the substance ("{remedy}") is a known remedy (like Hydrogen Peroxide, Clove Oil, etc.), treat it medically/chemically.
- If the substance is a custom input (e.g. "Lemon Juice", "Hot Sauce", "Ice Cream", "A Rock"), analyze its physical and chemical properties (pH, temperature, texture) and how they would interact with raw nerves or dentin.

Standard interactions reference (for known items):
- Hydrogen Peroxide creates bubbles.
- Rubbing Alcohol causes extreme dehydration and burning.
- Vinegar is acidic.
- Orajel numbs.
- Salt water is soothing.

Provide the output in JSON format specifically for an educational app.
"""


def decode_reaction(text: str) -> ReactionResult:
    """
    Decode Gemini's text payload into a ReactionResult.

    Pain levels outside 0-10 are clamped; anything else that does not match
    the schema is rejected.

    Raises:
        ReactionDecodeError: empty text, invalid JSON, or schema violation
    """
    if not text or not text.strip():
        raise ReactionDecodeError("Empty response from Gemini", raw_text=text or "")

    match = _FENCE_RE.match(text)
    body = match.group(1) if match else text

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ReactionDecodeError(f"Response is not valid JSON: {e}", raw_text=text) from e

    if not isinstance(data, dict):
        raise ReactionDecodeError("Response JSON is not an object", raw_text=text)

    try:
        payload = ReactionPayload.model_validate(data)
    except ValidationError as e:
        raise ReactionDecodeError(
            "Response does not match the reaction schema",
            raw_text=text,
            details={"errors": [err["loc"] for err in e.errors()]},
        ) from e

    return payload.to_result()


def reaction_client_config(**overrides: Any) -> GeminiConfig:
    """GeminiConfig preset for structured reaction requests."""
    params: Dict[str, Any] = {
        "response_mime_type": "application/json",
        "response_schema": REACTION_SCHEMA,
        "temperature": REACTION_TEMPERATURE,
    }
    params.update(overrides)
    return GeminiConfig(**params)


class ReactionResolver:
    """Turns a remedy and condition into a ReactionResult."""

    def __init__(self, client: Optional[GeminiClient] = None):
        self.client = client or GeminiClient(reaction_client_config())
        self._resolution_count = 0
        self._fallback_count = 0

    async def resolve(self, remedy: str, condition: Condition) -> ReactionResult:
        """
        Resolve the reaction for one remedy application.

        Args:
            remedy: Preset remedy value or free text
            condition: Current tooth condition

        Returns:
            ReactionResult, the fallback result on any failure
        """
        self._resolution_count += 1

        if remedy == RemedyType.NONE.value:
            return canned_reaction(condition)

        prompt = build_prompt(remedy, condition)
        try:
            response = await self.client.generate_async(prompt)
            result = decode_reaction(response.text)
        except GeminiUnavailableError as e:
            logger.error(f"Error fetching remedy reaction for '{remedy}': {e.message}")
            return self._fallback(remedy)
        except ReactionDecodeError as e:
            logger.warning(f"Discarding malformed reaction for '{remedy}': {e.message}")
            return self._fallback(remedy)
        except Exception as e:
            logger.exception(f"Unexpected error resolving reaction for '{remedy}': {e}")
            return self._fallback(remedy)

        logger.info(
            f"Reaction for '{remedy}' on {condition.value}: "
            f"pain={result.pain_level} mood={result.mood.value} verdict={result.verdict.value}"
        )
        return result

    def _fallback(self, remedy: str) -> ReactionResult:
        self._fallback_count += 1
        return fallback_reaction(remedy)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "resolutions": self._resolution_count,
            "fallbacks": self._fallback_count,
            "client": self.client.get_stats(),
        }
