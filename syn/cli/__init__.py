"""Command-line interface of the Syn preprocessor."""
