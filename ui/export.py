import csv

import pandas as pd

from backend.config import get_max_alternate_links

BASE_COLUMNS = ["Title", "Company", "Location", "Description", "Apply Link"]

EXPORT_FILENAME = "job_results.csv"
EXPORT_MIME = "text/csv"


def export_columns(max_links):
    return BASE_COLUMNS + [f"Optional Link {i}" for i in range(1, max_links + 1)]


def job_to_row(job, max_links):
    """Fixed-width row: links past max_links are dropped, missing ones left blank."""
    links = [l.link for l in job.apply_links[:max_links]]
    links += [""] * (max_links - len(links))
    return [
        job.title,
        job.company_name,
        job.location,
        job.description,
        job.apply_link,
    ] + links


def jobs_to_dataframe(jobs, max_links=None):
    if max_links is None:
        max_links = get_max_alternate_links()
    return pd.DataFrame(
        [job_to_row(j, max_links) for j in jobs],
        columns=export_columns(max_links),
        dtype=str,
    )


def jobs_to_csv(jobs, max_links=None):
    """
    Header row is plain; every data field is quoted with embedded quotes
    doubled. Returns None when there is nothing to export.
    """
    if not jobs:
        return None

    df = jobs_to_dataframe(jobs, max_links)
    header = ",".join(df.columns)
    body = df.to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    return header + "\n" + body.rstrip("\n")
