"""Complaint image relevance relay."""
