"""Template helpers that emit asset URLs and tags from kida templates."""
