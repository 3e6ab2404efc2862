"""site_walker.crawler: fetching pages and turning them into links."""
