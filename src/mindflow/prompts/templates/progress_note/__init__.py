"""Progress-note prompt templates."""
