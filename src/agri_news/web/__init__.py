# ABOUTME: JSON API for the news reader frontends.
# ABOUTME: Exposes normalized WordPress content and bookmarks over FastAPI.
