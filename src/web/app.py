"""FastAPI web dashboard for Sheet Bet Analytics."""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.templating import Jinja2Templates
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from config import get_settings
from src.agents import BetAnalysisAgent
from src.api.sheets import SheetError, TransportFailure, UnresolvableIdentifier, VacantSource
from src.data import DashboardView, get_store
from src.models.schemas import FilterState, SourceInfo
from src.stats import format_kpi_context

# App setup
app = FastAPI(
    title="Sheet Bet Analytics",
    description="Betting performance dashboard for shared spreadsheets",
    version="1.0.0",
)

# Paths
BASE_DIR = Path(__file__).parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Static files (if exists)
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# Template filters
def format_units(value: float) -> str:
    """Format a profit in units with sign."""
    return f"{value:+.2f}u"


def format_percent(value: float) -> str:
    """Format an already-scaled percentage."""
    return f"{value:.2f}%"


def format_signed(value: float) -> str:
    """Format number with explicit sign."""
    if value > 0:
        return f"+{value}"
    return str(value)


# Add filters to Jinja2
templates.env.filters["units"] = format_units
templates.env.filters["percent"] = format_percent
templates.env.filters["signed"] = format_signed


class LoadRequest(BaseModel):
    """Body for connecting a spreadsheet."""
    url: str


def _filters(
    competition: str,
    tipster: str,
    result: str,
    date: str,
) -> FilterState:
    return FilterState(competition=competition, tipster=tipster, result=result, date=date)


def _dump(model, **kwargs) -> dict:
    return model.model_dump(by_alias=True, mode="json", **kwargs)


def _status_for(error: SheetError) -> int:
    """HTTP status for a load failure."""
    if isinstance(error, UnresolvableIdentifier):
        return 400
    if isinstance(error, VacantSource):
        return 422
    if isinstance(error, TransportFailure):
        return 502
    return 500


def _source_info(applied: Optional[bool] = None) -> SourceInfo:
    store = get_store()
    info = SourceInfo(
        source=store.source,
        sheet_url=store.sheet_url,
        generation=store.generation,
        loaded_at=store.loaded_at,
        last_error=store.last_error,
        total_records=len(store.records),
    )
    if applied is not None:
        info.applied = applied
    return info


# ============== ROUTES ==============

@app.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    competition: str = Query("all"),
    tipster: str = Query("all"),
    result: str = Query("all"),
    date: str = Query(""),
    page: int = Query(1),
    sheet: Optional[str] = Query(None),
):
    """Main dashboard page."""
    settings = get_settings()
    store = get_store()
    error = None

    # A shared link (?sheet=...) takes priority, then the configured default
    url = sheet or (settings.default_sheet_url if store.source == "empty" else None)
    if url and url != store.sheet_url:
        try:
            await store.load_sheet(url)
        except SheetError as e:
            error = str(e)

    view = store.view(_filters(competition, tipster, result, date), page)

    return templates.TemplateResponse(request, "dashboard.html", {
        "page": "dashboard",
        "settings": settings,
        "view": view,
        "kpi_context": format_kpi_context(view.kpis),
        "source": _source_info(),
        "error": error,
    })


# ============== API ENDPOINTS ==============

@app.get("/api/records")
async def api_records(
    competition: str = Query("all"),
    tipster: str = Query("all"),
    result: str = Query("all"),
    date: str = Query(""),
    page: int = Query(1),
):
    """Get the filtered table page as JSON."""
    view = get_store().view(_filters(competition, tipster, result, date), page)
    return JSONResponse(_dump(view.page))


@app.get("/api/kpis")
async def api_kpis(
    competition: str = Query("all"),
    tipster: str = Query("all"),
    result: str = Query("all"),
    date: str = Query(""),
):
    """Get KPIs for the filtered records as JSON."""
    view = get_store().view(_filters(competition, tipster, result, date))
    return JSONResponse(_dump(view.kpis))


@app.get("/api/charts")
async def api_charts(
    competition: str = Query("all"),
    tipster: str = Query("all"),
    result: str = Query("all"),
    date: str = Query(""),
):
    """Get chart series for the filtered records as JSON."""
    view = get_store().view(_filters(competition, tipster, result, date))
    return JSONResponse({
        "cumulative": [_dump(p) for p in view.cumulative],
        "distribution": [_dump(s) for s in view.distribution],
    })


@app.get("/api/filters")
async def api_filters():
    """Get the filter dropdown options."""
    view: DashboardView = get_store().view()
    return JSONResponse({
        "competitions": view.competitions,
        "tipsters": view.tipsters,
        "results": ["WIN", "LOSS", "VOID", "PENDING"],
    })


@app.get("/api/source")
async def api_source():
    """Get information about the loaded data."""
    return JSONResponse(_dump(_source_info(), exclude_unset=True))


@app.post("/api/load")
async def api_load(body: LoadRequest):
    """Connect a shared spreadsheet."""
    store = get_store()
    try:
        applied = await store.load_sheet(body.url)
    except SheetError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e

    return JSONResponse(_dump(_source_info(applied), exclude_unset=True))


@app.post("/api/demo")
async def api_demo(seed: Optional[int] = Query(None)):
    """Switch to demo data."""
    get_store().load_demo(seed=seed)
    return JSONResponse(_dump(_source_info(), exclude_unset=True))


@app.post("/api/disconnect")
async def api_disconnect():
    """Forget the connected spreadsheet."""
    get_store().clear()
    return JSONResponse(_dump(_source_info(), exclude_unset=True))


@app.get("/api/records/{record_id}/analysis")
async def api_analysis(
    record_id: str,
    competition: str = Query("all"),
    tipster: str = Query("all"),
    result: str = Query("all"),
    date: str = Query(""),
):
    """Get an AI explanation of one record, with the filtered KPIs as context."""
    store = get_store()
    bet = store.get_record(record_id)
    if bet is None:
        raise HTTPException(status_code=404, detail=f"Record {record_id} not found")

    view = store.view(_filters(competition, tipster, result, date))
    kpi_context = format_kpi_context(view.kpis)

    agent = BetAnalysisAgent()
    analysis = await agent.explain(bet, kpi_context)

    return JSONResponse({
        "record": _dump(bet),
        "context": kpi_context,
        "analysis": analysis,
    })


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the web server."""
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=host or settings.web_host, port=port or settings.web_port)


if __name__ == "__main__":
    run_server()
