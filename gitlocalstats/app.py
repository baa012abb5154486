"""
FastAPI web application for gitlocalstats.

Provides REST API endpoints for the stored repositories and the
contribution calendar.
"""

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from gitlocalstats.config import get_window, validate_config
from gitlocalstats.grid_builder import build_columns
from gitlocalstats.history_calculator import calculate_history
from gitlocalstats.repo_scanner import ScanError, scan_git_folders
from gitlocalstats.storage import RepoListStorage

app = FastAPI(
    title="gitlocalstats",
    description="A contribution calendar for local git repositories",
    version="0.1.0",
)


class ScanRequest(BaseModel):
    """Request model for scanning a folder."""

    folder: str = Field(..., min_length=1, description="Folder to scan for Git repositories")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/repos")
def get_repos():
    """
    Get the stored repository list.

    Returns:
        JSON with the repository paths
    """
    storage = RepoListStorage()
    return {"repos": storage.get_repos()}


@app.post("/api/repos/scan")
def scan_repos(request: ScanRequest):
    """
    Scan a folder and add the repositories found to the stored list.

    Returns:
        JSON with the repositories found and how many were new
    """
    try:
        repos = scan_git_folders(request.folder)
    except ScanError as e:
        raise HTTPException(status_code=400, detail=str(e))

    storage = RepoListStorage()
    storage.ensure_file()
    added = storage.add_repos(repos)

    return {"found": repos, "added": added}


@app.get("/api/calendar")
def get_calendar(email: str = Query(..., min_length=1, description="Author e-mail to chart")):
    """
    Get the contribution calendar of an author.

    Returns:
        JSON with the window, week columns, today's cell and any
        repositories that could not be read
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    storage = RepoListStorage()
    result = calculate_history(email, storage.get_repos(), window=get_window())
    columns = build_columns(result.histogram)
    today_week, today_day = divmod(result.offset, 7)

    return {
        "email": email,
        "window": {
            "days": result.window.days,
            "weeks": result.window.weeks,
            "end": result.now.date().isoformat(),
        },
        "offset": result.offset,
        "total": result.total,
        "today": {"week": today_week, "day": today_day},
        "columns": {str(week): column for week, column in columns.items()},
        "failures": [
            {"path": failure.path, "message": failure.message}
            for failure in result.failures
        ],
    }
