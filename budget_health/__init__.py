"""Budget health engine: BAR, category charts and monthly overviews."""
