"""Core scanning engine: walking, aggregation, filtering and export."""
