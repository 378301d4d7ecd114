"""
Wire Master - Levels API

Generated levels served by number, with an in-memory LRU cache and
background pre-generation of the next levels.
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, BackgroundTasks, HTTPException, Request

from ..config import settings
from ..middleware.security import limiter, levels_rate_limit
from ..schemas import (
    GenerateRequest, GeneratorConfig, HintResponse, LevelData, ValidationReport,
)
from ..services.generator import generate_level, generate_level_by_number, get_hint
from ..services.validator import validate_level

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/levels", tags=["levels"])


# ============================================
# LEVEL CACHE (in-memory LRU)
# ============================================

@lru_cache(maxsize=settings.LEVEL_CACHE_SIZE)
def _cached_level(level_num: int) -> LevelData:
    """Generation is pure, so a level never changes once cached."""
    return generate_level_by_number(level_num)


@lru_cache(maxsize=settings.LEVEL_CACHE_SIZE)
def _cached_custom_level(config: GeneratorConfig, level_number: int) -> LevelData:
    return generate_level(config, level_number)


def get_cached_level(level_num: int) -> LevelData:
    return _cached_level(level_num)


def pregenerate_next_levels(current_level: int) -> None:
    """Warms the cache for the levels after `current_level`."""
    for offset in range(1, settings.PREGENERATE_AHEAD + 1):
        next_level = current_level + offset
        if next_level > settings.MAX_LEVEL:
            break
        _cached_level(next_level)
    logger.debug("[Levels] Pre-generated up to level %d", min(current_level + settings.PREGENERATE_AHEAD, settings.MAX_LEVEL))


def _check_level_num(level_num: int) -> None:
    if level_num < 1:
        raise HTTPException(status_code=400, detail="Invalid level number")
    if level_num > settings.MAX_LEVEL:
        raise HTTPException(status_code=404, detail="Level not found (End of content)")


# ============================================
# ENDPOINTS
# ============================================

@router.post("/generate", response_model=LevelData)
@limiter.limit(levels_rate_limit)
def generate_custom_level(request: Request, body: GenerateRequest):
    return _cached_custom_level(body.config, body.level_number)


@router.post("/validate", response_model=ValidationReport)
@limiter.limit(levels_rate_limit)
def validate_level_data(request: Request, level: LevelData):
    return ValidationReport(**validate_level(level))


@router.get("/{level_num}", response_model=LevelData)
@limiter.limit(levels_rate_limit)
def get_level(request: Request, level_num: int, background_tasks: BackgroundTasks):
    _check_level_num(level_num)
    level = get_cached_level(level_num)
    background_tasks.add_task(pregenerate_next_levels, level_num)
    return level


@router.get("/{level_num}/hint/{wire_index}", response_model=HintResponse)
@limiter.limit(levels_rate_limit)
def get_level_hint(request: Request, level_num: int, wire_index: int):
    _check_level_num(level_num)
    level = get_cached_level(level_num)

    hint = get_hint(level, wire_index)
    if hint is None:
        raise HTTPException(status_code=404, detail="Wire not found")

    ports, path = hint
    return HintResponse(
        level=level_num,
        wire_index=wire_index,
        color=ports.color,
        start=ports.start,
        end=ports.end,
        path=list(path),
    )
