"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(store wiring, settings, errors, logging). Keep feature-specific queries and
business logic in the corresponding feature package (e.g. `posts/`).
"""
