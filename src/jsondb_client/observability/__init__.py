"""Observability – logging for the query and transaction client."""
