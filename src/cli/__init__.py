"""Terminal UI and typer commands."""
