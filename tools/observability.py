"""Structured logging around garment and recommendation tool calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, Optional, ParamSpec, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from models.recommendation import RecommendationContext, RecommendationResult
from stylist_app.logging_config import correlation_context, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

ResultSummary = Callable[[Any], Dict[str, Any]]


def describe_context(context: RecommendationContext) -> Dict[str, Any]:
    """Request signals for the start event, without the owner id."""

    return {
        "mood": context.mood.value if context.mood else None,
        "weather": context.weather.value if context.weather else None,
        "temperature": context.temperature,
        "result_limit": context.result_limit,
    }


def summarize_recommendation(result: RecommendationResult) -> Dict[str, Any]:
    return {
        "outcome": result.outcome.value,
        "total_generated": result.total_generated,
        "top_score": result.outfits[0].score if result.outfits else None,
    }


def summarize_garments(garments: Sequence[Any]) -> Dict[str, Any]:
    return {"garment_count": len(garments)}


def _call_fields(args: Sequence[Any], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for value in [*args, *kwargs.values()]:
        if isinstance(value, RecommendationContext):
            fields["context"] = describe_context(value)
    filters = {key: value for key, value in kwargs.items() if isinstance(value, (str, int, float)) or value is None}
    if filters:
        fields["filters"] = redact_for_log(filters)
    return fields


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
    summarize: Optional[ResultSummary] = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion and failure of a tool call under one correlation id.

    ``input_model`` validates keyword arguments before the call; a
    :class:`ValidationError` is logged and re-raised. ``summarize`` turns the
    return value into fields for the completion event.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with correlation_context() as correlation_id:
                if input_model:
                    try:
                        kwargs = input_model.model_validate(kwargs).model_dump()
                    except ValidationError as exc:
                        log_event(
                            LOGGER,
                            logging.WARNING,
                            "tool_validation_failed",
                            tool=tool_name,
                            correlation_id=correlation_id,
                            errors=exc.errors(include_url=False),
                        )
                        raise

                log_event(
                    LOGGER,
                    logging.INFO,
                    "tool_call_started",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    **_call_fields(args, kwargs),
                )
                start = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "tool_call_failed",
                        tool=tool_name,
                        correlation_id=correlation_id,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "tool_call_completed",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    **(summarize(result) if summarize else {}),
                )
                return result

        return wrapper

    return decorator


__all__ = [
    "describe_context",
    "instrument_tool",
    "summarize_garments",
    "summarize_recommendation",
]
