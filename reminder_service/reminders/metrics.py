from prometheus_client import Counter


range_queries_total = Counter(
    "reminder_range_queries_total",
    "Total reminder date-range queries served",
)

range_matches_total = Counter(
    "reminder_range_matches_total",
    "Total reminders returned by date-range queries",
)

invalid_range_queries_total = Counter(
    "reminder_invalid_range_queries_total",
    "Total date-range queries rejected for malformed input",
)
