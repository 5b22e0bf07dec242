"""llm_boost — entitlement, crawl workflow and score aggregation rules."""

__version__ = "1.0.0"
