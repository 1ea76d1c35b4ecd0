"""
Command-line interface for jobmatcher.

Usage:
    jobmatcher jobs --limit 5
    jobmatcher --log-level DEBUG --log-dir /tmp/logs summaries
    jobmatcher summaries
    jobmatcher profile-set --name "Ada" --email ada@example.com --skill Python --skill React
    jobmatcher email 3 --seed 7 --save
    jobmatcher interest 3
    jobmatcher interested
    jobmatcher serve --port 8000
"""
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import List, Optional

import typer

from jobmatcher.cold_email import generate_cold_email, save_email
from jobmatcher.ingest import fetch_jobs
from jobmatcher.log import configure, get_logger
from jobmatcher.models import JobRecord
from jobmatcher.profile_store import build_profile, load_profile, write_profile
from jobmatcher.summaries import get_job_summaries
from jobmatcher.tracker import interested_jobs, record_interest

log = get_logger(__name__)

app = typer.Typer(help="Browse jobs and generate outreach emails.")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR (default: $LOG_LEVEL)"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for the daily log file"),
):
    """Browse jobs and generate outreach emails."""
    if log_level or log_dir:
        configure(level=log_level, log_dir=log_dir)


def _find_job(job_id: str) -> JobRecord:
    for job in fetch_jobs():
        if job.id == job_id:
            return job
    typer.echo(f"ERROR: Job not found: {job_id}", err=True)
    raise typer.Exit(1)


@app.command()
def jobs(
    limit: int = typer.Option(20, "--limit", help="Maximum number of jobs to print"),
    as_json: bool = typer.Option(False, "--json", help="Print full records as JSON"),
):
    """List current jobs, newest first."""
    records = fetch_jobs()[:limit]
    if as_json:
        typer.echo(json.dumps([j.to_dict() for j in records], indent=2, ensure_ascii=False))
        return
    for j in records:
        typer.echo(f"[{j.id}] {j.title} @ {j.company} ({j.location}) · {j.salary} · {j.posted_date}")


@app.command()
def summaries():
    """Print job summaries as JSON."""
    typer.echo(json.dumps([s.to_dict() for s in get_job_summaries()], indent=2, ensure_ascii=False))


@app.command("profile-set")
def profile_set(
    name: str = typer.Option(..., "--name"),
    email: str = typer.Option(..., "--email"),
    level: str = typer.Option("Mid Level", "--level", help="Experience level label"),
    skill: List[str] = typer.Option([], "--skill", help="Repeat for each skill"),
    education: List[str] = typer.Option([], "--education", help="Repeat for each entry"),
    path: Optional[Path] = typer.Option(None, "--path", help="Profile YAML location"),
):
    """Save the user profile."""
    profile = build_profile(
        {"name": name, "email": email, "experienceLevel": level, "skills": skill, "education": education}
    )
    written = write_profile(profile, path)
    typer.echo(f"Profile saved: {written}")


@app.command("profile-show")
def profile_show(path: Optional[Path] = typer.Option(None, "--path")):
    profile = load_profile(path)
    if profile is None:
        typer.echo("No profile found. Run `jobmatcher profile-set` first.", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def email(
    job_id: str = typer.Argument(..., help="Job id as shown by `jobmatcher jobs`"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible wording"),
    save: bool = typer.Option(False, "--save", help="Also write the email to data/"),
    show_tips: bool = typer.Option(True, "--tips/--no-tips", help="Print resume suggestions"),
    path: Optional[Path] = typer.Option(None, "--profile", help="Profile YAML location"),
):
    """Generate a cold email and resume suggestions for one job."""
    profile = load_profile(path)
    if profile is None:
        typer.echo("No profile found. Run `jobmatcher profile-set` first.", err=True)
        raise typer.Exit(1)

    job = _find_job(job_id)
    rng = random.Random(seed) if seed is not None else None
    result = generate_cold_email(profile, job, rng=rng)
    typer.echo(result.email)

    if show_tips:
        for section, tips in result.detailed_improvements.to_dict().items():
            if not tips:
                continue
            typer.echo(f"\n=== {section.title()} ===")
            for tip in tips:
                typer.echo(f"  - {tip}")

    if save:
        typer.echo(f"\nSaved: {save_email(job, result.email)}")


@app.command()
def interest(
    job_id: str = typer.Argument(...),
    no: bool = typer.Option(False, "--no", help="Record as not interested"),
):
    """Record a swipe decision for a job."""
    job = _find_job(job_id)
    record_interest(job, interested=not no)
    typer.echo(f"{'Skipped' if no else 'Saved'}: {job.title} @ {job.company}")


@app.command()
def interested():
    """List jobs marked as interesting that are still in the current list."""
    for j in interested_jobs(fetch_jobs()):
        typer.echo(f"[{j.id}] {j.title} @ {j.company} · {j.job_link or ''}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
):
    """Run the HTTP API."""
    import uvicorn

    log.info("Serving API on %s:%d", host, port)
    uvicorn.run("jobmatcher.api:app", host=host, port=port)


if __name__ == "__main__":
    app()
