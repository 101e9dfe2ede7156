"""
Streamlit UI for the listing search interpreter.
Calls the local FastAPI server at http://localhost:8000 to interpret queries,
or runs the parser in-process when the API is unreachable.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local imports for fallback/local mode (when API isn't used)
from listing_search.config import API_URL, ALL_NZ_LOCATION_LABEL  # defaults
from listing_search.query_parser import QueryParser  # in-process interpreter
from listing_search.search_url import build_search_url  # URL projection
from listing_search.utils import serialize_parsed_query  # dict payload

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Listing Search Interpreter", layout="wide")  # wide layout

# Main page title
st.title("🔎 Listing Search – What did you mean?")  # friendly header

# Cache the local parser so it is created once per session
@st.cache_resource(show_spinner=False)
def init_local_parser() -> QueryParser:
	"""Create the in-process parser."""
	return QueryParser()

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", API_URL)  # where the API lives
	preferred = st.selectbox("Preferred location", [ALL_NZ_LOCATION_LABEL, "Auckland", "Wellington", "Christchurch", "Hamilton"])
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local parser", value=False, help="If enabled or API is unreachable, the app runs fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; using local parser.")  # inform user

local_parser: Optional[QueryParser] = None  # placeholder
if use_local or not api_available:
	local_parser = init_local_parser()

# Main text input where users type a natural language query
query = st.text_input("Search listings", placeholder="e.g., Find me Lexus CT200h after 2012 with 100k or below mileage near Auckland")
st.caption("Tip: Try 'Toyota Camry after 2015 under $20k' or 'Sony headphones under $200'")  # helpful examples

if query.strip():
	try:
		if local_parser is not None:
			# Local mode: run the parser inside this process
			payload = serialize_parsed_query(local_parser.parse(query))
			url = build_search_url(query, preferred_location=preferred, parser=local_parser)
		else:
			# API mode: let the server interpret and build the URL
			resp = requests.get(f"{api_url}/interpret", params={"q": query}, timeout=10)
			resp.raise_for_status()  # raise error if server responded with an error code
			payload = resp.json()
			resp = requests.get(f"{api_url}/search-url", params={"q": query, "preferred_location": preferred}, timeout=10)
			resp.raise_for_status()
			url = resp.json()["url"]

		interpreted = payload.get("interpretedAs")
		if interpreted:
			st.success(f"Interpreted as: {interpreted}")
		else:
			st.info("No filters detected; searching by keywords only.")

		c1, c2 = st.columns([1, 1])  # filters + URL side by side
		with c1:
			st.subheader("Filters")
			st.json(payload.get("filters", {}))
		with c2:
			st.subheader("Search URL")
			st.code(url)

	except requests.RequestException as e:  # network/API errors
		st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_parser is not None:
	st.sidebar.caption("Mode: Local parser")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
