ANALYSIS_KINDS = ("descriptive", "correlation", "distribution", "outliers")

DEFAULT_CONFIG = {
    "input": {
        "type_override": "",  # csv|json
        "encoding": "",  # empty -> detect
        "max_rows": 250000,
        "max_cols": 2000,
        "http_timeout": 15,
    },
    "analysis": {
        "bins": 10,
        "max_listed_outliers": 10,
        "histogram_bar_width": 20,
        "top_correlation_columns": 3,
    },
    "report": {
        "output_dir": "outputs",
        "write_artifacts": False,
    },
    "logging": {
        "level": "INFO",
    },
}
