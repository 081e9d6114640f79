"""Portfolio dashboard backend-for-frontend (JSON views over the published sheet)."""
