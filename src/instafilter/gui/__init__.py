"""Qt desktop front-end."""
