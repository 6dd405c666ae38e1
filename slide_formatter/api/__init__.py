"""HTTP interface for the slide formatter."""
