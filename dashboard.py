import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from search_suite.benchmark import ALGORITHM_KEYS, BenchmarkConfig, run_benchmark, skipped_searches
from search_suite.datasets import DISTRIBUTIONS, make_keys, pick_queries

st.set_page_config(page_title="Search Algorithm Benchmark Dashboard", layout="wide")

st.title("Search Algorithm Benchmark Dashboard")
st.markdown("Configure and benchmark seven search algorithms over sorted integer keys.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Dataset")
distribution = st.sidebar.selectbox(
    "Key Distribution",
    options=list(DISTRIBUTIONS),
    index=1,
    help="'sequential' uses the keys 1..N; 'clustered' and 'skewed' are hard cases for interpolation search"
)
dataset_size = st.sidebar.number_input(
    "Dataset Size",
    min_value=0,
    max_value=2000000,
    value=100000,
    step=10000,
    help="Number of keys to generate"
)
seed = st.sidebar.number_input("Random Seed", min_value=0, value=42, step=1)

st.sidebar.subheader("Queries")
num_runs = st.sidebar.number_input(
    "Number of Benchmark Runs",
    min_value=1,
    max_value=10000,
    value=200,
    help="Number of random queries to average results over"
)
miss_rate = st.sidebar.slider(
    "Absent Query Rate",
    min_value=0.0,
    max_value=1.0,
    value=0.1,
    step=0.05,
    help="Fraction of queries that do not occur in the dataset"
)

st.sidebar.subheader("Searches to Benchmark")
selected = [key for key, name in ALGORITHM_KEYS.items() if st.sidebar.checkbox(name, value=True, key=f"run_{key}")]

col1, col2 = st.columns([1, 3])

with col1:
    run_clicked = st.button("Run Benchmark", type="primary", use_container_width=True)

with col2:
    st.info(f"Configuration: {dataset_size:,} {distribution} keys, {num_runs} runs, {miss_rate:.0%} absent queries")

if 'results' not in st.session_state:
    st.session_state.results = None


def show_distribution(keys):
    """Histogram and summary statistics of the generated keys."""
    st.markdown("---")
    st.subheader("Key Distribution")

    num_bins = 50
    hist_counts, _ = np.histogram(keys, bins=num_bins)

    hist_fig = go.Figure()
    hist_fig.add_trace(go.Bar(
        x=list(range(1, num_bins + 1)),
        y=hist_counts,
        marker=dict(color='steelblue', line=dict(width=1, color='darkblue')),
        name='Keys',
        hovertemplate='Bin %{x}<br>Count: %{y}<extra></extra>',
        opacity=0.7
    ))
    hist_fig.update_layout(
        title=f"Key Distribution ({num_bins} bins)",
        xaxis_title="Bin Number",
        yaxis_title="Count",
        height=400,
        showlegend=False,
        xaxis=dict(tickmode='linear', dtick=max(1, num_bins // 20))
    )
    st.plotly_chart(hist_fig, use_container_width=True)

    col_stats1, col_stats2, col_stats3, col_stats4 = st.columns(4)
    with col_stats1:
        st.metric("Total Keys", f"{len(keys):,}")
    with col_stats2:
        st.metric("Min Key", f"{keys[0]:,}")
    with col_stats3:
        st.metric("Max Key", f"{keys[-1]:,}")
    with col_stats4:
        st.metric("Unique Keys", f"{len(set(keys)):,}")


def run_benchmark_pipeline(config: BenchmarkConfig):
    """Run the complete benchmark pipeline"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    status_text.text("Generating keys...")
    keys = make_keys(config.distribution, config.dataset_size, seed=config.seed)
    progress_bar.progress(20)

    if not keys:
        st.warning("The dataset is empty: every search returns 'not found'.")
    else:
        show_distribution(keys)

    names = config.search_names
    for name, reason in skipped_searches(keys, names).items():
        st.warning(f"Skipping {name}: {reason}")

    queries = pick_queries(keys, config.runs, miss_rate=config.miss_rate, seed=config.seed)

    # Run in chunks so the progress bar can move
    all_results = {}
    chunk = max(1, len(queries) // 20)
    for start in range(0, len(queries), chunk):
        partial = run_benchmark(keys, queries[start:start + chunk], names)
        for name, data in partial.items():
            merged = all_results.setdefault(name, {'times': [], 'probes': [], 'successes': []})
            for metric, values in data.items():
                merged[metric].extend(values)
        progress_bar.progress(int(20 + 80 * min(start + chunk, len(queries)) / len(queries)))
        status_text.text(f"Ran {min(start + chunk, len(queries))}/{len(queries)} queries...")

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")

    results_data = []
    for name, data in all_results.items():
        results_data.append({
            'Method': name,
            'Avg Time (µs)': float(np.mean(data['times'])),
            'Avg Probes': float(np.mean(data['probes'])),
            'Max Probes': int(max(data['probes'])),
            'Success Rate (%)': float(np.mean(data['successes']) * 100),
        })
    return pd.DataFrame(results_data), len(keys)


if run_clicked:
    try:
        config = BenchmarkConfig(
            dataset_size=int(dataset_size),
            runs=int(num_runs),
            distribution=distribution,
            miss_rate=float(miss_rate),
            seed=int(seed),
            algorithms=selected,
        )
    except ValueError as e:
        st.error(str(e))
    else:
        with st.spinner("Running benchmark..."):
            result_df, data_size = run_benchmark_pipeline(config)
            st.session_state.results = result_df
            st.session_state.data_size = data_size
            st.session_state.distribution = config.distribution
            st.session_state.runs = config.runs

# Display results
if st.session_state.results is not None:
    st.markdown("---")
    st.subheader("Benchmark Results")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Dataset Size", f"{st.session_state.data_size:,} keys")
    with col2:
        st.metric("Distribution", st.session_state.distribution)
    with col3:
        st.metric("Benchmark Runs", st.session_state.runs)

    st.dataframe(st.session_state.results.round(2), use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Performance Comparison")

    tab1, tab2 = st.tabs(["Average Time", "Average Probes"])

    with tab1:
        st.bar_chart(st.session_state.results.set_index('Method')['Avg Time (µs)'])

    with tab2:
        st.bar_chart(st.session_state.results.set_index('Method')['Avg Probes'])

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Pick a Distribution**: uniform keys favour interpolation search, clustered and skewed keys punish it
    2. **Configure Dataset**: Set the number of keys and the random seed
    3. **Configure Queries**: Set the number of queries and how many of them should be absent
    4. **Select Searches**: Choose which of the seven searches to benchmark
    5. **Run Benchmark**: Click the "Run Benchmark" button to start the evaluation
    6. **Analyze Results**: Compare average time and probes per search

    ### What to Look For

    - **Ternary Search** needs fewer rounds than binary search but probes more keys in total
    - **Jump Search** grows with the square root of the dataset size
    - **Exponential Search** is cheapest for keys near the front
    """)
