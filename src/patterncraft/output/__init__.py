"""Output layer — Rich console, render sinks, and result formatting."""
