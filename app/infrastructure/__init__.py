"""Infrastructure modules for the site messages engine.

- i18n: message tables, key resolution, interpolation and rich text
"""
