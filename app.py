"""
ARGO Ocean Data Explorer
Main Streamlit Application
"""

import logging
import sys
import time
from pathlib import Path

import numpy as np
import streamlit as st
from streamlit_folium import st_folium

# Add src to path
sys.path.append(str(Path(__file__).parent / 'src'))

from app_config import ConfigManager
from app_state import AppState, resolve_location
from data_export import EXPORT_FORMATS, export_result, profiles_to_dataframe
from query_processor import QueryProcessor
from visualizations import create_profile_plot, get_map_provider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configure Streamlit page
st.set_page_config(
    page_title="ARGO Ocean Data Explorer",
    page_icon="🌊",
    layout="wide"
)

# Initialize session state
if 'config' not in st.session_state:
    st.session_state.config = ConfigManager.load_from_env()
    logging.getLogger().setLevel(st.session_state.config.log_level)
if 'app_state' not in st.session_state:
    st.session_state.app_state = AppState(user_location=st.session_state.config.default_location)
if 'query_processor' not in st.session_state:
    st.session_state.query_processor = QueryProcessor(st.session_state.config)
if 'latency_rng' not in st.session_state:
    st.session_state.latency_rng = np.random.default_rng()


def load_sample_data():
    """Load the reference dataset covering every ocean region."""
    with st.spinner("Generating reference ARGO data..."):
        profiles = st.session_state.query_processor.load_reference_data()
        st.session_state.app_state.set_reference_profiles(profiles)
    st.success(f"Reference data loaded: {len(profiles)} profiles")


def simulate_latency():
    config = st.session_state.config
    delay = st.session_state.latency_rng.uniform(
        config.latency_min_seconds, config.latency_max_seconds
    )
    if delay > 0:
        time.sleep(delay)


def handle_query(prompt: str):
    """Run a chat query and store the outcome on the app state."""
    state: AppState = st.session_state.app_state
    state.add_user_message(prompt)
    state.start_query()

    try:
        with st.spinner("Processing your query..."):
            simulate_latency()
            result, response = st.session_state.query_processor.process_query(prompt)
        state.set_results(result, response)
    except Exception as e:
        logger.error(f"Error processing query {prompt!r}: {e}")
        state.set_error("Something went wrong while processing your query. Please try again.")
    finally:
        state.finish_query()


def render_stats(state: AppState):
    """Show float count, profile count and average conditions."""
    result = state.query_results
    col1, col2, col3, col4 = st.columns(4)

    col1.metric("Active Floats", len(result.float_locations) if result else 0)
    col2.metric("Profiles Found", result.summary.count if result else 0)
    col3.metric("Avg Temperature", f"{result.summary.avg_temperature:.1f}°C" if result else "--")
    col4.metric("Avg Salinity (PSU)", f"{result.summary.avg_salinity:.2f}" if result else "--")


def render_export(state: AppState):
    st.subheader("💾 Export Data")
    if not state.has_results:
        st.warning("No data to export. Please run a query first to generate data for export.")
        return

    col1, col2 = st.columns(2)
    for col, fmt in zip((col1, col2), EXPORT_FORMATS):
        content, filename, mime = export_result(state.query_results, fmt)
        col.download_button(
            f"Download {fmt.upper()}",
            content,
            file_name=filename,
            mime=mime,
            key=f"export_{fmt}"
        )


def main():
    """Main application function."""
    config = st.session_state.config
    state: AppState = st.session_state.app_state
    processor: QueryProcessor = st.session_state.query_processor

    # Header
    st.title("🌊 ARGO Ocean Data Explorer")
    st.markdown("### AI-Powered Oceanographic Data Analysis & Visualization")

    # Sidebar
    with st.sidebar:
        st.header("⚙️ Settings")

        # Reference data section
        if not state.has_reference_data:
            if st.button("Load Sample Data", type="primary"):
                load_sample_data()
        else:
            st.success(f"✅ Reference data loaded ({len(state.reference_profiles)} profiles)")

        # User location
        st.divider()
        st.subheader("📍 Your Location")
        lat = st.number_input("Latitude", value=float(state.user_location[0]), format="%.4f")
        lon = st.number_input("Longitude", value=float(state.user_location[1]), format="%.4f")
        location, used_default = resolve_location(lat, lon, config.default_location)
        if used_default:
            st.warning("Location unavailable, using default location in the Indian Ocean")
        state.set_user_location(*location)

        # Quick queries
        st.divider()
        st.subheader("💡 Quick Queries")
        for label, query in processor.suggest_queries():
            if st.button(label, key=f"quick_{label}"):
                handle_query(query)
                st.rerun()

        st.divider()
        if st.button("Clear Chat"):
            state.clear()
            st.rerun()

    render_stats(state)

    # Main content area
    col1, col2 = st.columns([3, 2])

    with col1:
        st.header("💬 Ocean Data Assistant")

        # Display chat messages
        with st.container():
            for message in state.chat_history:
                with st.chat_message(message.role):
                    st.markdown(message.message)

        if state.error:
            st.error(state.error)

        render_export(state)

    with col2:
        st.header("🗺️ ARGO Float Locations")
        map_provider = get_map_provider(config.map_provider, tiles=config.map_tiles)
        result = state.query_results
        float_map = map_provider.render(
            result.float_locations if result else [],
            ocean_key=result.summary.ocean if result else None,
            user_location=state.user_location
        )
        st_folium(float_map, height=400, width=None)

    st.header("📊 Depth Profiles")
    if state.has_results and state.query_results.profiles:
        df = profiles_to_dataframe(state.query_results.profiles)

        # Show data preview
        with st.expander("📋 Data Preview", expanded=False):
            st.dataframe(df.head(100), use_container_width=True)

        profile_fig = create_profile_plot(df)
        if profile_fig:
            st.plotly_chart(profile_fig, use_container_width=True)
    else:
        st.info("Ask a question to see temperature and salinity profiles here!")

        # Show sample visualization with reference data
        if state.has_reference_data:
            sample_df = profiles_to_dataframe(state.reference_profiles)
            st.subheader("📊 Reference Data Overview")
            profile_fig = create_profile_plot(sample_df)
            if profile_fig:
                st.plotly_chart(profile_fig, use_container_width=True)

    # --- Chat input (outside columns, always at bottom) ---
    prompt = st.chat_input("Ask about ARGO ocean data...")
    if prompt:
        handle_query(prompt)
        st.rerun()


if __name__ == "__main__":
    main()
