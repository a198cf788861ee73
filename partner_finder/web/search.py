"""Search routes - HTML results table and JSON API."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from partner_finder.config import AppConfig
from partner_finder.matching.matcher import search_with_status
from partner_finder.utils.text_processing import (
    KeywordLimitError,
    check_keyword_limit,
    parse_keywords,
)

from .dependencies import get_config

logger = logging.getLogger("partner_finder.web")

router = APIRouter()


@router.get("/search")
def search_page(request: Request, keywords: str = "", config: AppConfig = Depends(get_config)):
    terms = parse_keywords(keywords)
    try:
        check_keyword_limit(terms, config.search.max_keywords)
    except KeywordLimitError as e:
        logger.info("Rejected keyword input %r: %s", keywords, e)
        return request.app.state.templates.TemplateResponse("search.html", {
            "request": request,
            "keywords": keywords,
            "results": None,
            "flash_message": str(e),
            "flash_type": "error",
        }, status_code=400)

    outcome = search_with_status(config.store.data_file, terms)
    return request.app.state.templates.TemplateResponse("search.html", {
        "request": request,
        "keywords": keywords,
        "results": outcome.results,
        "store_error": outcome.load_error,
        "records_loaded": outcome.records_loaded,
    })


@router.get("/api/search")
def search_api(keywords: str = "", config: AppConfig = Depends(get_config)):
    terms = parse_keywords(keywords)
    try:
        check_keyword_limit(terms, config.search.max_keywords)
    except KeywordLimitError as e:
        logger.info("Rejected keyword input %r: %s", keywords, e)
        return JSONResponse({"detail": str(e)}, status_code=400)

    outcome = search_with_status(config.store.data_file, terms)
    return {
        "results": [r.to_dict() for r in outcome.results],
        "count": len(outcome.results),
        "records_loaded": outcome.records_loaded,
        "store_error": outcome.load_error,
    }
