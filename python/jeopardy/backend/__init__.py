"""Models, engine and data providers for the trivia board."""
