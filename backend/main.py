import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

load_dotenv()

from backend.config import validate_env
from backend.engine.search_engine import run_job_search
from backend.errors import JobSearchError
from backend.schemas import ErrorResponse

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

validate_env()


app = FastAPI(
    title="Job Search Proxy API",
    version="1.0.0"
)


# -------------------------
# Errors -> {"error": ...}
# -------------------------
@app.exception_handler(JobSearchError)
async def job_search_error_handler(request: Request, exc: JobSearchError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


# -------------------------
# Health
# -------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# -------------------------
# Search
# -------------------------
@app.get(
    "/api/jobs",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def search_jobs(
    q: Optional[str] = None,
    location: Optional[str] = None,
    industry: Optional[str] = None,
    token: Optional[str] = None,
):
    """
    Forward the query to SearchAPI and relay its JSON body as-is.
    """
    data = run_job_search(q, location=location, industry=industry, token=token)
    return JSONResponse(content=data)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
