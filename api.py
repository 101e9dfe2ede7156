"""
FastAPI server exposing the listing search interpreter.
Endpoints:
- GET /health: basic health check
- GET /interpret?q=...: structured filters and "interpreted as" summary for a search phrase
- GET /search-url?q=...&preferred_location=...: the /search URL the frontend should navigate to

The interpreter is pure and cheap, so one shared parser serves every request.
"""

# Import standard libraries for timing
import time  # measure request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for parsing and URL building
from listing_search.config import configure_logging  # log level from environment
from listing_search.query_parser import QueryParser  # query interpreter
from listing_search.search_url import build_search_url  # URL projection
from listing_search.utils import serialize_filters  # camelCase filter payload

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Listing Search Interpreter API", version="1.0.0")  # web app

# Shared stateless parser
PARSER = QueryParser()


# FastAPI startup hook: apply the configured log level once the server is running
@app.on_event("startup")
async def startup_event():
	"""Configure logging when the app is served, not when the module is imported."""
	configure_logging()
	logger.info("[API] Startup: listing search interpreter ready")


# Pydantic model that describes the structured filters in responses
class FiltersOut(BaseModel):
	query: str  # residual keyword query
	make: Optional[str] = None  # manufacturer
	model: Optional[str] = None  # model name
	yearMin: Optional[int] = None  # earliest year
	yearMax: Optional[int] = None  # latest year
	priceMin: Optional[int] = None  # lowest price
	priceMax: Optional[int] = None  # highest price
	odometerMin: Optional[int] = None  # lowest odometer (km)
	odometerMax: Optional[int] = None  # highest odometer (km)
	location: Optional[str] = None  # place name
	color: Optional[str] = None  # color name
	condition: Optional[List[str]] = None  # canonical condition labels
	category: Optional[str] = None  # category slug (disabled by default)


# Pydantic model for the complete interpretation payload
class InterpretResponse(BaseModel):
	originalQuery: str  # text exactly as received
	interpretedAs: Optional[str] = None  # human-readable summary
	filters: FiltersOut  # structured filters
	elapsed_ms: float  # server-side parse time in ms


# Pydantic model for the URL builder payload
class SearchUrlResponse(BaseModel):
	url: str  # path plus encoded query string


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"parser_ready": PARSER is not None,  # always True once imported
	}


# Main interpretation endpoint that accepts a free-text query
@app.get("/interpret", response_model=InterpretResponse, response_model_exclude_none=True)
async def interpret(q: str = Query(..., description="Natural language listing search")):
	"""Interpret a search phrase into structured filters."""
	start = time.time()  # start timer
	logger.debug(f"[API] /interpret q='{q}'")  # debug log of input

	parsed = PARSER.parse(q)  # never raises
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /interpret served in {elapsed_ms:.2f} ms | {parsed.interpreted_as or 'no filters'}")

	return InterpretResponse(
		originalQuery=parsed.original_query,
		interpretedAs=parsed.interpreted_as,
		filters=FiltersOut(**serialize_filters(parsed.filters)),
		elapsed_ms=round(elapsed_ms, 2),
	)


# URL builder endpoint used by the search box
@app.get("/search-url", response_model=SearchUrlResponse)
async def search_url(
	q: str = Query(..., description="Natural language listing search"),
	preferred_location: Optional[str] = Query(None, description="Stored location preference, e.g. 'Wellington' or 'All NZ'"),
):
	"""Return the search URL for a phrase, falling back to the preferred location."""
	url = build_search_url(q, preferred_location=preferred_location, parser=PARSER)
	logger.debug(f"[API] /search-url q='{q}' -> {url}")
	return SearchUrlResponse(url=url)


if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host="0.0.0.0", port=8000)
