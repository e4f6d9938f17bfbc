"""Server-rendered HTML pages: view models, builders and Jinja2 templates."""
