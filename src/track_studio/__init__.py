"""Track Studio - GPX import, route metrics and activity synthesis."""
