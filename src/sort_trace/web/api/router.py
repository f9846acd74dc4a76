from __future__ import annotations

import logging
from random import Random

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from sort_trace.config import ServiceConfig
from sort_trace.domain.errors import ArrayParseError, ArrayTooLargeError, GeneratorError, UnknownAlgorithmError
from sort_trace.sim.generate import generate_unique
from sort_trace.sim.parsing import parse_array, parse_int
from sort_trace.sim.registry import AlgorithmRegistry
from sort_trace.sim.runner import run_sort
from sort_trace.web.api import mappers, schemas

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": schemas.ErrorResponse}}


def _registry(request: Request) -> AlgorithmRegistry:
    return request.app.state.registry


def _config(request: Request) -> ServiceConfig:
    return request.app.state.config


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=schemas.ErrorResponse(error=message).model_dump())


def _parse_int_param(name: str, value: str | None) -> int:
    if value is None:
        raise GeneratorError(f"Missing parameter: {name}")
    try:
        return parse_int(value)
    except ArrayParseError as exc:
        raise GeneratorError(f"Invalid integer for {name}: {value}") from exc


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/algorithms", response_model=schemas.AlgorithmListResponse)
async def list_algorithms(request: Request):
    return mappers.build_algorithm_list(_registry(request))


@router.post("/run", response_model=schemas.RunResponse, responses=_ERROR_RESPONSES)
async def run(request: Request, algorithm: str | None = None):
    config = _config(request)
    registry = _registry(request)
    key = algorithm or config.default_algorithm
    if registry.get(key) is None:
        logger.warning("Unknown algorithm requested: %r", key)
        return _error("Unknown algorithm")

    body = (await request.body()).decode("utf-8", errors="replace")
    try:
        values = parse_array(body)
    except ArrayParseError as exc:
        logger.warning("Invalid array body: %s", exc)
        return _error("Invalid array")

    try:
        result = run_sort(registry, key, values, max_length=config.max_array_length)
    except (UnknownAlgorithmError, ArrayTooLargeError) as exc:
        return _error(str(exc))
    return mappers.build_run_response(result)


@router.get("/generate", response_model=list[int], responses=_ERROR_RESPONSES)
async def generate(
    request: Request,
    count: str | None = None,
    max_value: str | None = Query(None, alias="max"),
    seed: str | None = None,
):
    config = _config(request)
    try:
        n = _parse_int_param("count", count)
        upper = _parse_int_param("max", max_value)
        if n > config.max_generate_count:
            raise GeneratorError(f"count must be <= {config.max_generate_count}")
        rng = Random(_parse_int_param("seed", seed) if seed is not None else None)
        return generate_unique(n, upper, rng)
    except GeneratorError as exc:
        return _error(str(exc))
