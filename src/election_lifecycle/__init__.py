"""Election lifecycle status engine and comparison analytics."""
