"""POST /api/convert and /api/path: SVG and path data to equations and curves."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svgequations.config import Settings
from svgequations.dependencies import get_settings
from svgequations.engine.config import ConversionConfig
from svgequations.engine.converter import Converter
from svgequations.errors import ParameterError, ParseError
from svgequations.models.requests import ConvertRequest, PathRequest
from svgequations.models.responses import ConvertResponse, PathResponse
from svgequations.svg.path_parser import iter_subpaths, parse_path_data
from svgequations.svg.transform_parser import parse_transform

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    try:
        config = ConversionConfig(
            precision=settings.default_precision if req.precision is None else req.precision,
            equation_type=req.equation_type,
            latex=req.latex,
            lenient=settings.default_lenient if req.lenient is None else req.lenient,
            scale=req.scale,
            rotation=req.rotation,
            angle_units=req.angle_units,
            translate=req.translate,
            transform=req.transform,
            width_multiplier=req.width_multiplier,
            style=req.style,
        )
        result = Converter(config).convert(req.svg)
    except (ParseError, ParameterError) as e:
        logger.info("Conversion rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return ConvertResponse(
        equations=result.equations,
        style_script=result.style_script,
        path_count=result.path_count,
        curve_count=result.curve_count,
        errors=result.errors,
        processing_time_ms=result.processing_time_ms,
    )


@router.post("/path", response_model=PathResponse)
def path(req: PathRequest, settings: Settings = Depends(get_settings)) -> PathResponse:
    lenient = settings.default_lenient if req.lenient is None else req.lenient
    try:
        parsed = parse_path_data(req.d, lenient)
        parsed = parsed.transform(parse_transform(req.transform, lenient))
    except (ParseError, ParameterError) as e:
        logger.info("Path rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return PathResponse(
        curves=[[(p.x, p.y) for p in curve] for curve in parsed.curves],
        element_count=len(parsed),
        subpath_count=sum(1 for _ in iter_subpaths(parsed)),
    )
