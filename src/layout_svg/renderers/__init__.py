"""Renderers: label layout, stroke styling, the scene API, and the SVG emitter."""
