import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from ui.accumulator import SearchSession, load_more, new_search
from ui.api_client import JobsApiClient
from ui.cards import apply_links_html, job_card_html
from ui.export import EXPORT_FILENAME, EXPORT_MIME, jobs_to_csv

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# =========================================================
# 1. PAGE CONFIG & STYLES
# =========================================================
st.set_page_config(page_title="Job Search", layout="wide")

st.markdown("""
<style>
    .job-card {
        background: rgba(255,255,255,0.9);
        border-radius: 12px;
        padding: 20px;
        box-shadow: 0 4px 12px rgba(0,0,0,0.05);
        margin-bottom: 12px;
        border: 1px solid #eee;
    }
    .job-title { font-size: 22px; font-weight: 600; color: #1F2937; margin-bottom: 6px; }
    .job-meta { font-size: 14px; color: #4B5563; }
    .job-desc {
        font-size: 13px; color: #374151; margin-top: 8px;
        display: -webkit-box; -webkit-line-clamp: 3; -webkit-box-orient: vertical; overflow: hidden;
    }
    .apply-btn {
        background: #3B82F6;
        color: white !important;
        padding: 8px 20px;
        border-radius: 8px;
        text-decoration: none;
        font-weight: 600;
        display: inline-block;
        margin-top: 12px;
    }
</style>
""", unsafe_allow_html=True)

# =========================================================
# 2. SESSION STATE
# =========================================================
if "search_session" not in st.session_state:
    st.session_state.search_session = SearchSession()

if "api_client" not in st.session_state:
    st.session_state.api_client = JobsApiClient()

session = st.session_state.search_session
client = st.session_state.api_client


def render_job(job):
    st.markdown(job_card_html(job), unsafe_allow_html=True)

    if job.apply_links:
        with st.expander("More ways to apply"):
            st.markdown(apply_links_html(job), unsafe_allow_html=True)


# =========================================================
# 3. UI LAYOUT
# =========================================================
st.title("Job Search")

with st.form("search_form"):
    c1, c2, c3 = st.columns(3)
    u_query = c1.text_input('Job Title/Keywords (e.g., "software engineer past 24 hours")')
    u_location = c2.text_input("Location (comma-separated)")
    u_industry = c3.text_input("Industry")
    search_clicked = st.form_submit_button(
        "Searching..." if session.loading else "Search Jobs",
        use_container_width=True,
        disabled=session.loading,
    )

if search_clicked:
    if not u_query.strip():
        st.warning("Please enter job title or keywords.")
    else:
        with st.spinner("Searching..."):
            new_search(client, session, u_query, location=u_location, industry=u_industry)

if session.can_export:
    st.download_button(
        "Export to CSV",
        jobs_to_csv(session.results),
        EXPORT_FILENAME,
        EXPORT_MIME,
        use_container_width=True,
    )

if session.error:
    st.error(f"Error: {session.error}")

if not session.results and not session.loading and not session.error:
    st.info("No jobs found. Try a different search.")

for job in session.results:
    render_job(job)

if session.next_page_token:
    if st.button(
        "Loading..." if session.loading else "Load More",
        use_container_width=True,
        disabled=session.loading,
    ):
        with st.spinner("Loading..."):
            load_more(client, session)
        st.rerun()
