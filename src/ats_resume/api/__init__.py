"""HTTP API for resume PDF generation."""
