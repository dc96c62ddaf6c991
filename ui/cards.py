import html


def job_card_html(job):
    return f"""
    <div class="job-card">
        <div class="job-title">{html.escape(job.title)}</div>
        <div class="job-meta"><strong>Company:</strong> {html.escape(job.company_name)}</div>
        <div class="job-meta"><strong>Location:</strong> {html.escape(job.location)}</div>
        <div class="job-desc">{html.escape(job.description)}</div>
        <a href="{html.escape(job.apply_link, quote=True)}" target="_blank"
           rel="noopener noreferrer" class="apply-btn">Apply</a>
    </div>
    """


def apply_links_html(job):
    """'More ways to apply' list; labels fall back to the URL when source is blank."""
    items = [
        f'<li><a href="{html.escape(l.link, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">{html.escape(l.source or l.link)}</a></li>'
        for l in job.apply_links
    ]
    return "<ul>" + "".join(items) + "</ul>"
