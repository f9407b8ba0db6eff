"""Static reference data and stable identifiers."""
