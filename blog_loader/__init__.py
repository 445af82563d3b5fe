"""Render blog articles from a JSON document into an HTML page."""
