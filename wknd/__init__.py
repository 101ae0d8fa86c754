"""
WKND - Byline component for the WKND content site

Renders authored byline content (a person's name, occupations and photo) through
a view model that decides whether the component has enough content to display.

Architecture:
- Content Context: Content nodes, property maps and image resolution
- Components Context: Request-scoped view models and the model factory
- Rendering Context: Jinja2 templates and component rendering
"""

__version__ = "0.1.0"
