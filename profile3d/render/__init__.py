"""SVG renderers: isometric calendar, language pie and the composed document."""
