"""Scrape extension store user counts and render them as SVG badges."""
