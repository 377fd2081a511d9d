"""
1D Acceleration Dashboard - Streamlit web app.
Sidebar "1D Menu" mirrors the spreadsheet menu: Set Variables, then Process Data.
Uses synthetic data by default; upload a workbook or CSV for real logs.
"""

import tempfile
from pathlib import Path

import streamlit as st
import plotly.graph_objects as go

import config
from errors import MissingConfigurationError
from insights import insights_table
from pipeline import run_pipeline
from settings import Settings, load_settings, save_settings
from synthetic_data import demo_settings, write_synthetic_log
from visualization import insight_chart_specs

# Page config
st.set_page_config(
    page_title="1D Acceleration Insights",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Dark mode toggle (persists in session)
if "dark_mode" not in st.session_state:
    st.session_state.dark_mode = False


def get_theme_css(dark_mode):
    """Metric values in the accent colour of the active theme."""
    accent = "#ff3333" if dark_mode else "#cc0000"
    background = ".stApp { background-color: #0a0a0a; }" if dark_mode else ""
    return f"<style>{background} [data-testid=\"stMetricValue\"] {{ color: {accent} !important; }}</style>"


def current_properties():
    """Saved variables as key/value pairs, or empty strings when none are saved yet."""
    try:
        return load_settings().to_properties()
    except MissingConfigurationError:
        return {key: "" for key in config.SETTINGS_KEYS}


def set_variables_form():
    """Sidebar form for the eight variables; saves them on submit."""
    props = current_properties()
    with st.sidebar.expander("Set Variables", expanded=False):
        with st.form("set_variables"):
            answers = {}
            for key in config.SETTINGS_KEYS:
                title, text = config.SETTINGS_PROMPTS[key]
                answers[key] = st.text_input(text or title, value=props.get(key, ""), key=f"var_{key}")
            submitted = st.form_submit_button("Save")
        if submitted:
            try:
                save_settings(Settings.from_properties(answers))
                st.success("Variables set")
            except (MissingConfigurationError, ValueError) as e:
                st.error(str(e))


def load_data():
    """Returns (source path, settings) for the chosen data source, or None."""
    data_source = st.sidebar.radio(
        "Data source",
        ["Synthetic (demo)", "Upload workbook"],
        help="Use a synthetic log for testing, or upload your logger export.",
    )
    if data_source == "Synthetic (demo)":
        duration = st.sidebar.slider("Duration (seconds)", 8, 30, 10)
        push = st.sidebar.slider("Push duration (seconds)", 1, 6, 4)
        peak = st.sidebar.slider("Peak acceleration (m/s²)", 0.5, 5.0, 1.0)
        with tempfile.NamedTemporaryFile(delete=False, suffix=".csv") as tmp:
            path = tmp.name
        write_synthetic_log(path, duration_sec=duration, push_sec=push, peak_accel_ms2=peak, seed=42)
        return path, demo_settings()

    uploaded = st.sidebar.file_uploader("Upload log", type=["xlsx", "xlsm", "csv"])
    if uploaded is None:
        return None
    try:
        settings = load_settings()
    except MissingConfigurationError as e:
        st.error(f"{e}. Open 1D Menu > Set Variables.")
        return None
    with tempfile.NamedTemporaryFile(delete=False, suffix=Path(uploaded.name).suffix) as tmp:
        tmp.write(uploaded.getvalue())
        return tmp.name, settings


def plot_insight(derived, spec, dark_mode=False):
    """One line chart (d/t, v/t or a/t) against elapsed time."""
    header = config.DERIVED_COLUMN_LAYOUT[spec.y_column][1]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=derived[spec.x_column],
            y=derived[spec.y_column],
            mode="lines",
            line=dict(color="#cc0000" if not dark_mode else "#ff3333", width=2),
            name=header,
        )
    )
    grid = "#333333" if dark_mode else "#dddddd"
    fig.update_layout(
        title=spec.title,
        template="plotly_dark" if dark_mode else "plotly_white",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(20,20,20,0.8)" if dark_mode else "rgba(250,250,250,0.9)",
        font=dict(color="#ffffff" if dark_mode else "#1a1a1a"),
        xaxis=dict(title="Elapsed time (s)", gridcolor=grid),
        yaxis=dict(title=spec.y_label, gridcolor=grid),
        legend=dict(orientation="h", yanchor="top", y=-0.2, xanchor="center", x=0.5),
    )
    return fig


def main():
    # Dark mode toggle - top left corner
    top_left, _ = st.columns([1, 8])
    with top_left:
        dark_mode = st.toggle("🌙 Dark mode", value=st.session_state.dark_mode, key="dark_toggle")
        st.session_state.dark_mode = dark_mode

    st.markdown(get_theme_css(dark_mode), unsafe_allow_html=True)

    st.title("📈 1D Acceleration Insights")
    st.markdown("Velocity, displacement and charts from logged accelerometer readings.")

    st.sidebar.header("1D Menu")
    set_variables_form()
    data = load_data()
    if data is None:
        st.info("Upload a workbook to process your logged data.")
        return
    source_path, settings = data

    if not st.sidebar.button("Process Data", type="primary"):
        st.info("Press Process Data to run the pipeline.")
        return

    try:
        with st.spinner("Processing data..."):
            result = run_pipeline(settings, source_path)
    except (ValueError, LookupError, FileNotFoundError) as e:
        st.error(str(e))
        return

    insights = result["insights"]
    cols = st.columns(len(insights.as_rows()) + 1)
    for col, (label, value) in zip(cols, insights.as_rows()):
        with col:
            st.metric(label, f"{value:.3f}")
    with cols[-1]:
        st.metric("Shift value", f"{result['shift_value']:.3f}")

    st.markdown("---")
    specs = insight_chart_specs(len(result["raw"]))
    tabs = st.tabs([spec.title for spec in specs] + ["Data"])
    for tab, spec in zip(tabs, specs):
        with tab:
            st.plotly_chart(plot_insight(result["derived"], spec, dark_mode), use_container_width=True)
    with tabs[-1]:
        st.dataframe(insights_table(insights), hide_index=True)
        st.dataframe(result["readings"].join(result["derived"]), use_container_width=True)

    output_path = Path(result["output_path"])
    st.sidebar.download_button(
        "Download processed workbook",
        data=output_path.read_bytes(),
        file_name=output_path.name,
    )


if __name__ == "__main__":
    main()
