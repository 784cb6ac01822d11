"""
LLM-scored reranking through a LangChain chat model.

The model receives the query and the numbered chunk texts and must answer
with JSON of the form {"scores": [number, ...]}, one score per chunk in
the given order. Matches are reordered by those scores, which replace
the retrieval scores.

Dependencies: langchain_core
System role: Model-judged relevance reranker
"""

import json
import logging
from typing import Any, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from raglab.boundary.vdb.vector_schemas import ScoredChunk
from raglab.core.exceptions import RerankError

logger = logging.getLogger(__name__)


class LLMReranker:
    """
    Reranker that asks a chat model to score each match.

    Usage:
        reranker = LLMReranker(ChatGoogleGenerativeAI(model="gemini-2.5-flash", temperature=0))
        reranked = await reranker.rerank("what purrs?", matches)
    """

    name = "llm"

    def __init__(self, model: BaseChatModel) -> None:
        """
        Initialize reranker.

        Args:
            model: LangChain chat model; temperature 0 keeps scores stable
        """
        self.model = model

    async def rerank(self, query: str, matches: Sequence[ScoredChunk]) -> list[ScoredChunk]:
        """
        Rescore `matches` with the model and sort by the new scores.

        Missing or non-numeric scores count as 0.0; ties keep retrieved order.

        Raises:
            RerankError: The model call failed or its answer is not the
                expected JSON
        """
        if not matches:
            return []

        prompt = self._build_prompt(query, matches)
        try:
            response = await self.model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"{__name__}:rerank - Model call failed: {type(e).__name__}")
            raise RerankError(
                f"Rerank model call failed: {e}",
                reranker=self.name,
                details={"match_count": len(matches)},
            ) from e

        scores = self._parse_scores(self._content_text(response.content), len(matches))
        rescored = [ScoredChunk(match.chunk, score) for match, score in zip(matches, scores)]
        return sorted(rescored, key=lambda match: -match.score)

    def _build_prompt(self, query: str, matches: Sequence[ScoredChunk]) -> str:
        """Build the scoring prompt for the chat model."""
        lines = "\n".join(f"{index}: {match.chunk.text}" for index, match in enumerate(matches))
        return f"""You are a reranker. Given a query and chunks, output JSON with a scores array in the same order as the chunks.
Query: {query}
Chunks:
{lines}
Return ONLY JSON: {{"scores": [number, ...]}}"""

    @staticmethod
    def _content_text(content: Any) -> str:
        if isinstance(content, str):
            return content
        return "".join(
            part if isinstance(part, str) else str(part.get("text", ""))
            for part in content
        )

    def _parse_scores(self, response_text: str, expected: int) -> list[float]:
        """
        Parse the model's JSON answer.

        Handles markdown code fences around the JSON.
        """
        text = response_text
        if "```json" in text:
            text = text.split("```json")[1].split("```")[0]
        elif "```" in text:
            text = text.split("```")[1].split("```")[0]

        try:
            data = json.loads(text.strip())
        except json.JSONDecodeError as e:
            raise RerankError(
                "Failed to parse rerank response as JSON",
                reranker=self.name,
                details={"response_length": len(response_text)},
            ) from e

        raw_scores = data.get("scores") if isinstance(data, dict) else None
        if not isinstance(raw_scores, list):
            raise RerankError("Rerank response has no scores array", reranker=self.name)
        if len(raw_scores) != expected:
            logger.warning(
                f"{__name__}:_parse_scores - Expected {expected} scores, got {len(raw_scores)}"
            )

        scores = [
            float(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else 0.0
            for value in raw_scores[:expected]
        ]
        return scores + [0.0] * (expected - len(scores))

    def __repr__(self) -> str:
        return f"LLMReranker(model={type(self.model).__name__})"
