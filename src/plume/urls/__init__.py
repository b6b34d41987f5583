"""URLs — compiled templates, composite splitting, and the URL manager.

Templates are validated once when a ``UrlManager`` is created and reused
for every render and parse afterwards.
"""
